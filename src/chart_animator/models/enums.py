"""
Enums for the chart animation engine
"""

from enum import Enum, auto


class Dimension(Enum):
    """
    Independently animatable dimensions of a chart

    X: primary axis (horizontal reveal)
    Y: secondary axis (vertical growth)
    H: magnitude (bar height, bubble size)
    """
    X = auto()
    Y = auto()
    H = auto()


class EasingOption(Enum):
    """Built-in easing curve presets (resolved by models.easing)"""
    LINEAR = auto()
    EASE_IN_QUAD = auto()
    EASE_OUT_QUAD = auto()
    EASE_IN_OUT_QUAD = auto()
    EASE_IN_CUBIC = auto()
    EASE_OUT_CUBIC = auto()
    EASE_IN_OUT_CUBIC = auto()
    EASE_IN_QUART = auto()
    EASE_OUT_QUART = auto()
    EASE_IN_OUT_QUART = auto()
    EASE_IN_QUINT = auto()
    EASE_OUT_QUINT = auto()
    EASE_IN_OUT_QUINT = auto()
    EASE_IN_SINE = auto()
    EASE_OUT_SINE = auto()
    EASE_IN_OUT_SINE = auto()
    EASE_IN_EXPO = auto()
    EASE_OUT_EXPO = auto()
    EASE_IN_OUT_EXPO = auto()
    EASE_IN_CIRC = auto()
    EASE_OUT_CIRC = auto()
    EASE_IN_OUT_CIRC = auto()
    EASE_IN_ELASTIC = auto()
    EASE_OUT_ELASTIC = auto()
    EASE_IN_OUT_ELASTIC = auto()
    EASE_IN_BACK = auto()
    EASE_OUT_BACK = auto()
    EASE_IN_OUT_BACK = auto()
    EASE_IN_BOUNCE = auto()
    EASE_OUT_BOUNCE = auto()
    EASE_IN_OUT_BOUNCE = auto()


class AnimatorEventType(Enum):
    """Notification kinds emitted by the Animator"""
    UPDATED = auto()   # Phases recomputed (every tick, and on forced completion)
    STOPPED = auto()   # Tick source released, engine idle


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    ANIMATOR = auto()    # animate/stop, phase lifecycle
    TICK = auto()        # Tick source subscription, render loop
    OBSERVER = auto()    # Notification dispatch
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()     # Default general category
