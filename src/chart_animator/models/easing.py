"""
Easing Models

Easing curves shape how a dimension's phase advances over its duration.
Every curve has the signature (elapsed, duration) -> progress, where
elapsed is already clamped to [0, duration] and duration > 0.

Curves such as elastic and back overshoot [0, 1] on purpose; the
DimensionState clamps the resulting phase.
"""

import math
from typing import Callable, Dict

from chart_animator.models.enums import EasingOption

EasingFunction = Callable[[float, float], float]


# === Polynomial ===

def ease_linear(elapsed: float, duration: float) -> float:
    """
    Linear easing (constant speed)

    Args:
        elapsed: Time since the animation started (0.0 to duration)
        duration: Total animation time

    Returns:
        Progress (0.0 to 1.0)
    """
    return elapsed / duration


def ease_in_quad(elapsed: float, duration: float) -> float:
    """Quadratic ease-in (slow start → fast end)"""
    p = elapsed / duration
    return p * p


def ease_out_quad(elapsed: float, duration: float) -> float:
    """Quadratic ease-out (fast start → slow end)"""
    p = elapsed / duration
    return -p * (p - 2)


def ease_in_out_quad(elapsed: float, duration: float) -> float:
    """Quadratic ease-in-out (slow start → fast middle → slow end)"""
    p = elapsed / (duration / 2)
    if p < 1:
        return 0.5 * p * p
    p -= 1
    return -0.5 * (p * (p - 2) - 1)


def ease_in_cubic(elapsed: float, duration: float) -> float:
    """Cubic ease-in (very slow start)"""
    p = elapsed / duration
    return p ** 3


def ease_out_cubic(elapsed: float, duration: float) -> float:
    """Cubic ease-out (very slow end)"""
    p = elapsed / duration - 1
    return p ** 3 + 1


def ease_in_out_cubic(elapsed: float, duration: float) -> float:
    """Cubic ease-in-out (very smooth acceleration/deceleration)"""
    p = elapsed / (duration / 2)
    if p < 1:
        return 0.5 * p ** 3
    p -= 2
    return 0.5 * (p ** 3 + 2)


def ease_in_quart(elapsed: float, duration: float) -> float:
    p = elapsed / duration
    return p ** 4


def ease_out_quart(elapsed: float, duration: float) -> float:
    p = elapsed / duration - 1
    return -(p ** 4 - 1)


def ease_in_out_quart(elapsed: float, duration: float) -> float:
    p = elapsed / (duration / 2)
    if p < 1:
        return 0.5 * p ** 4
    p -= 2
    return -0.5 * (p ** 4 - 2)


def ease_in_quint(elapsed: float, duration: float) -> float:
    p = elapsed / duration
    return p ** 5


def ease_out_quint(elapsed: float, duration: float) -> float:
    p = elapsed / duration - 1
    return p ** 5 + 1


def ease_in_out_quint(elapsed: float, duration: float) -> float:
    p = elapsed / (duration / 2)
    if p < 1:
        return 0.5 * p ** 5
    p -= 2
    return 0.5 * (p ** 5 + 2)


# === Trigonometric / exponential ===

def ease_in_sine(elapsed: float, duration: float) -> float:
    p = elapsed / duration
    return 1 - math.cos(p * math.pi / 2)


def ease_out_sine(elapsed: float, duration: float) -> float:
    p = elapsed / duration
    return math.sin(p * math.pi / 2)


def ease_in_out_sine(elapsed: float, duration: float) -> float:
    """Sine ease-in-out (default curve for axis reveals)"""
    p = elapsed / duration
    return -0.5 * (math.cos(math.pi * p) - 1)


def ease_in_expo(elapsed: float, duration: float) -> float:
    if elapsed == 0:
        return 0.0
    return 2 ** (10 * (elapsed / duration - 1))


def ease_out_expo(elapsed: float, duration: float) -> float:
    if elapsed == duration:
        return 1.0
    return 1 - 2 ** (-10 * elapsed / duration)


def ease_in_out_expo(elapsed: float, duration: float) -> float:
    if elapsed == 0:
        return 0.0
    if elapsed == duration:
        return 1.0
    p = elapsed / (duration / 2)
    if p < 1:
        return 0.5 * 2 ** (10 * (p - 1))
    return 0.5 * (2 - 2 ** (-10 * (p - 1)))


def ease_in_circ(elapsed: float, duration: float) -> float:
    p = elapsed / duration
    return -(math.sqrt(1 - p * p) - 1)


def ease_out_circ(elapsed: float, duration: float) -> float:
    p = elapsed / duration - 1
    return math.sqrt(1 - p * p)


def ease_in_out_circ(elapsed: float, duration: float) -> float:
    p = elapsed / (duration / 2)
    if p < 1:
        return -0.5 * (math.sqrt(1 - p * p) - 1)
    p -= 2
    return 0.5 * (math.sqrt(1 - p * p) + 1)


# === Overshooting ===

_ELASTIC_PERIOD = 0.3
_BACK_OVERSHOOT = 1.70158


def ease_in_elastic(elapsed: float, duration: float) -> float:
    if elapsed == 0:
        return 0.0
    p = elapsed / duration
    if p == 1:
        return 1.0
    period = duration * _ELASTIC_PERIOD
    s = period / 4
    p -= 1
    return -(2 ** (10 * p) * math.sin((p * duration - s) * (2 * math.pi) / period))


def ease_out_elastic(elapsed: float, duration: float) -> float:
    if elapsed == 0:
        return 0.0
    p = elapsed / duration
    if p == 1:
        return 1.0
    period = duration * _ELASTIC_PERIOD
    s = period / 4
    return 2 ** (-10 * p) * math.sin((p * duration - s) * (2 * math.pi) / period) + 1


def ease_in_out_elastic(elapsed: float, duration: float) -> float:
    if elapsed == 0:
        return 0.0
    p = elapsed / (duration / 2)
    if p == 2:
        return 1.0
    period = duration * (_ELASTIC_PERIOD * 1.5)
    s = period / 4
    p -= 1
    if p < 0:
        return -0.5 * (2 ** (10 * p) * math.sin((p * duration - s) * (2 * math.pi) / period))
    return 2 ** (-10 * p) * math.sin((p * duration - s) * (2 * math.pi) / period) * 0.5 + 1


def ease_in_back(elapsed: float, duration: float) -> float:
    s = _BACK_OVERSHOOT
    p = elapsed / duration
    return p * p * ((s + 1) * p - s)


def ease_out_back(elapsed: float, duration: float) -> float:
    s = _BACK_OVERSHOOT
    p = elapsed / duration - 1
    return p * p * ((s + 1) * p + s) + 1


def ease_in_out_back(elapsed: float, duration: float) -> float:
    s = _BACK_OVERSHOOT * 1.525
    p = elapsed / (duration / 2)
    if p < 1:
        return 0.5 * (p * p * ((s + 1) * p - s))
    p -= 2
    return 0.5 * (p * p * ((s + 1) * p + s) + 2)


def ease_out_bounce(elapsed: float, duration: float) -> float:
    p = elapsed / duration
    if p < 1 / 2.75:
        return 7.5625 * p * p
    if p < 2 / 2.75:
        p -= 1.5 / 2.75
        return 7.5625 * p * p + 0.75
    if p < 2.5 / 2.75:
        p -= 2.25 / 2.75
        return 7.5625 * p * p + 0.9375
    p -= 2.625 / 2.75
    return 7.5625 * p * p + 0.984375


def ease_in_bounce(elapsed: float, duration: float) -> float:
    return 1 - ease_out_bounce(duration - elapsed, duration)


def ease_in_out_bounce(elapsed: float, duration: float) -> float:
    if elapsed < duration / 2:
        return ease_in_bounce(elapsed * 2, duration) * 0.5
    return ease_out_bounce(elapsed * 2 - duration, duration) * 0.5 + 0.5


EASING_PRESETS: Dict[EasingOption, EasingFunction] = {
    EasingOption.LINEAR: ease_linear,
    EasingOption.EASE_IN_QUAD: ease_in_quad,
    EasingOption.EASE_OUT_QUAD: ease_out_quad,
    EasingOption.EASE_IN_OUT_QUAD: ease_in_out_quad,
    EasingOption.EASE_IN_CUBIC: ease_in_cubic,
    EasingOption.EASE_OUT_CUBIC: ease_out_cubic,
    EasingOption.EASE_IN_OUT_CUBIC: ease_in_out_cubic,
    EasingOption.EASE_IN_QUART: ease_in_quart,
    EasingOption.EASE_OUT_QUART: ease_out_quart,
    EasingOption.EASE_IN_OUT_QUART: ease_in_out_quart,
    EasingOption.EASE_IN_QUINT: ease_in_quint,
    EasingOption.EASE_OUT_QUINT: ease_out_quint,
    EasingOption.EASE_IN_OUT_QUINT: ease_in_out_quint,
    EasingOption.EASE_IN_SINE: ease_in_sine,
    EasingOption.EASE_OUT_SINE: ease_out_sine,
    EasingOption.EASE_IN_OUT_SINE: ease_in_out_sine,
    EasingOption.EASE_IN_EXPO: ease_in_expo,
    EasingOption.EASE_OUT_EXPO: ease_out_expo,
    EasingOption.EASE_IN_OUT_EXPO: ease_in_out_expo,
    EasingOption.EASE_IN_CIRC: ease_in_circ,
    EasingOption.EASE_OUT_CIRC: ease_out_circ,
    EasingOption.EASE_IN_OUT_CIRC: ease_in_out_circ,
    EasingOption.EASE_IN_ELASTIC: ease_in_elastic,
    EasingOption.EASE_OUT_ELASTIC: ease_out_elastic,
    EasingOption.EASE_IN_OUT_ELASTIC: ease_in_out_elastic,
    EasingOption.EASE_IN_BACK: ease_in_back,
    EasingOption.EASE_OUT_BACK: ease_out_back,
    EasingOption.EASE_IN_OUT_BACK: ease_in_out_back,
    EasingOption.EASE_IN_BOUNCE: ease_in_bounce,
    EasingOption.EASE_OUT_BOUNCE: ease_out_bounce,
    EasingOption.EASE_IN_OUT_BOUNCE: ease_in_out_bounce,
}


def easing_function_from_option(option: EasingOption) -> EasingFunction:
    """
    Resolve a preset to its easing function

    Args:
        option: EasingOption member

    Returns:
        Easing function (elapsed, duration) -> progress
    """
    return EASING_PRESETS[option]
