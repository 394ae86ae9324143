"""Services layer"""

from .notifier import AnimatorNotifier, AnimatorObserver

__all__ = [
    "AnimatorNotifier",
    "AnimatorObserver",
]
