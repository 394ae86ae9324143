"""Animation engine: phase computation and tick sources"""

from .tick_source import TickSource, TickHandle, FrameTicker, ManualTickSource
from .animator import Animator, DEFAULT_EASING

__all__ = [
    "Animator",
    "DEFAULT_EASING",
    "TickSource",
    "TickHandle",
    "FrameTicker",
    "ManualTickSource",
]
