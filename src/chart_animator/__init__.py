"""
chart-animator — time-based phase engine for chart reveal animations.

Exports:
- Animator: per-dimension phase engine
- FrameTicker / ManualTickSource: tick sources
- AnimatorNotifier / AnimatorObserver: notification contract
- Dimension, EasingOption: public enums
"""

from .models import (
    Dimension,
    EasingOption,
    AnimatorEventType,
    AnimatorEvent,
    AnimatorConfig,
    DimensionState,
    easing_function_from_option,
)
from .engine import Animator, DEFAULT_EASING, FrameTicker, ManualTickSource, TickSource, TickHandle
from .services import AnimatorNotifier, AnimatorObserver
from .managers import ConfigManager

__version__ = "0.3.0"

__all__ = [
    "Animator",
    "DEFAULT_EASING",
    "FrameTicker",
    "ManualTickSource",
    "TickSource",
    "TickHandle",
    "AnimatorNotifier",
    "AnimatorObserver",
    "ConfigManager",
    "Dimension",
    "EasingOption",
    "AnimatorEventType",
    "AnimatorEvent",
    "AnimatorConfig",
    "DimensionState",
    "easing_function_from_option",
]
