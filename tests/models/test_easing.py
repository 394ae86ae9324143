"""
Tests for easing presets.
"""

import pytest

from chart_animator.models.easing import (
    EASING_PRESETS,
    ease_in_out_bounce,
    ease_linear,
    ease_out_bounce,
    easing_function_from_option,
)
from chart_animator.models.enums import EasingOption


@pytest.mark.parametrize("option", list(EasingOption), ids=lambda o: o.name)
def test_preset_starts_at_zero_and_ends_at_one(option):
    curve = easing_function_from_option(option)

    assert curve(0.0, 2.0) == pytest.approx(0.0, abs=1e-9)
    assert curve(2.0, 2.0) == pytest.approx(1.0, abs=1e-9)


def test_every_option_has_a_preset():
    assert set(EASING_PRESETS) == set(EasingOption)


def test_curves_depend_on_ratio_not_absolute_time():
    for option in (EasingOption.EASE_IN_CUBIC, EasingOption.EASE_OUT_EXPO, EasingOption.EASE_IN_CIRC):
        curve = easing_function_from_option(option)
        assert curve(0.3, 1.0) == pytest.approx(curve(3.0, 10.0))


@pytest.mark.parametrize(
    "option",
    [
        EasingOption.EASE_IN_OUT_QUAD,
        EasingOption.EASE_IN_OUT_CUBIC,
        EasingOption.EASE_IN_OUT_QUART,
        EasingOption.EASE_IN_OUT_QUINT,
        EasingOption.EASE_IN_OUT_SINE,
        EasingOption.EASE_IN_OUT_CIRC,
    ],
    ids=lambda o: o.name,
)
def test_symmetric_curves_cross_half_at_midpoint(option):
    assert easing_function_from_option(option)(0.5, 1.0) == pytest.approx(0.5)


def test_ease_in_is_slower_than_linear():
    ease_in = easing_function_from_option(EasingOption.EASE_IN_QUAD)
    ease_out = easing_function_from_option(EasingOption.EASE_OUT_QUAD)

    assert ease_in(0.25, 1.0) < ease_linear(0.25, 1.0) < ease_out(0.25, 1.0)


def test_back_overshoots():
    ease_out_back = easing_function_from_option(EasingOption.EASE_OUT_BACK)
    assert max(ease_out_back(t / 100, 1.0) for t in range(101)) > 1.0


def test_bounce_landmarks():
    # first touchdown, then a bounce back up
    assert ease_out_bounce(1 / 2.75, 1.0) == pytest.approx(1.0)
    assert ease_out_bounce(1.5 / 2.75, 1.0) == pytest.approx(0.75)
    assert ease_in_out_bounce(0.5, 1.0) == pytest.approx(0.5)
