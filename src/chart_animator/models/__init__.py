"""
Domain models for the chart animation engine
"""

from .enums import Dimension, EasingOption, AnimatorEventType, LogLevel, LogCategory
from .easing import EasingFunction, EASING_PRESETS, easing_function_from_option
from .dimension_state import DimensionState
from .events import AnimatorEvent, AnimatorUpdatedEvent, AnimatorStoppedEvent
from .config import AnimatorConfig

__all__ = [
    'Dimension',
    'EasingOption',
    'AnimatorEventType',
    'LogLevel',
    'LogCategory',
    'EasingFunction',
    'EASING_PRESETS',
    'easing_function_from_option',
    'DimensionState',
    'AnimatorEvent',
    'AnimatorUpdatedEvent',
    'AnimatorStoppedEvent',
    'AnimatorConfig',
]
