"""
Animator Notifier - Observer registry and dispatch

Collapses the two notification channels a renderer may use into one:
- Observers: objects implementing AnimatorObserver, held by weak reference
- Callbacks: plain callables receiving an AnimatorEvent, held strongly

Dispatch is synchronous. By the time dispatch() returns every live
observer and callback has been invoked.
"""

import weakref
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, List, Optional, Protocol, runtime_checkable, TYPE_CHECKING

from chart_animator.models.enums import AnimatorEventType, LogCategory
from chart_animator.models.events import AnimatorEvent
from chart_animator.utils.logger import get_category_logger

if TYPE_CHECKING:
    from chart_animator.engine.animator import Animator

log = get_category_logger(LogCategory.OBSERVER)

EventCallback = Callable[[AnimatorEvent], Any]


@runtime_checkable
class AnimatorObserver(Protocol):
    """Renderer-side delegate notified by the Animator"""

    def animator_updated(self, animator: "Animator") -> None:
        """Called when the Animator has stepped."""
        ...

    def animator_stopped(self, animator: "Animator") -> None:
        """Called when the Animator has stopped."""
        ...


@dataclass
class CallbackHandler:
    """Callback registration"""
    callback: EventCallback
    priority: int


class AnimatorNotifier:
    """
    Notification hub owned by an Animator

    Features:
    - Weakly referenced observers (the Animator never keeps a renderer alive)
    - Priority-ordered callbacks (high priority first)
    - Fault tolerance (one failing handler doesn't stop the others)
    - Bounded event history for debugging

    Example:
        notifier = AnimatorNotifier()
        notifier.add_observer(chart_view)

        @notifier.on_stopped
        def done(event):
            print("settled", event.phases)
    """

    def __init__(self, history_limit: int = 100):
        self._observers: List[weakref.ref] = []
        self._handlers: Dict[AnimatorEventType, List[CallbackHandler]] = {
            event_type: [] for event_type in AnimatorEventType
        }
        self._event_history: Deque[AnimatorEvent] = deque(maxlen=history_limit)

    # === Registration ===

    def add_observer(self, observer: AnimatorObserver) -> None:
        """
        Register an observer (weakly referenced).

        Registering the same observer twice has no effect.
        """
        if any(ref() is observer for ref in self._observers):
            return
        self._observers.append(weakref.ref(observer))
        log.debug("Observer registered", observer=type(observer).__name__)

    def remove_observer(self, observer: AnimatorObserver) -> None:
        self._observers = [ref for ref in self._observers if ref() is not None and ref() is not observer]

    def subscribe(
        self,
        event_type: AnimatorEventType,
        callback: EventCallback,
        priority: int = 0,
    ) -> EventCallback:
        """
        Register a callback for one event type

        Args:
            event_type: UPDATED or STOPPED
            callback: Called with the AnimatorEvent
            priority: Execution priority (higher = called first, default: 0)

        Returns:
            The callback, so this can be used as a decorator
        """
        handlers = self._handlers[event_type]
        handlers.append(CallbackHandler(callback, priority))
        handlers.sort(key=lambda h: h.priority, reverse=True)

        log.debug(
            "Callback subscribed",
            event_type=event_type.name,
            callback=getattr(callback, "__name__", repr(callback)),
            priority=priority
        )
        return callback

    def on_updated(self, callback: Optional[EventCallback] = None, priority: int = 0):
        """
        Register an UPDATED callback.

        Works as a call, a bare decorator or a decorator factory:
            notifier.on_updated(redraw)
            @notifier.on_updated
            @notifier.on_updated(priority=10)
        """
        return self._register(AnimatorEventType.UPDATED, callback, priority)

    def on_stopped(self, callback: Optional[EventCallback] = None, priority: int = 0):
        """Register a STOPPED callback (same forms as on_updated)."""
        return self._register(AnimatorEventType.STOPPED, callback, priority)

    def _register(self, event_type: AnimatorEventType, callback: Optional[EventCallback], priority: int):
        if callback is None:
            return lambda cb: self.subscribe(event_type, cb, priority)
        return self.subscribe(event_type, callback, priority)

    def remove_callback(self, callback: EventCallback) -> None:
        """Unregister callback from every event type"""
        for event_type, handlers in self._handlers.items():
            self._handlers[event_type] = [h for h in handlers if h.callback is not callback]

    @property
    def observer_count(self) -> int:
        """Number of observers still alive"""
        return sum(1 for ref in self._observers if ref() is not None)

    def callback_count(self, event_type: Optional[AnimatorEventType] = None) -> int:
        if event_type is not None:
            return len(self._handlers[event_type])
        return sum(len(h) for h in self._handlers.values())

    # === Dispatch ===

    def dispatch(self, event: AnimatorEvent, animator: "Animator") -> None:
        """
        Deliver event to all observers, then all callbacks

        Lists are snapshotted first, so handlers may (un)register others
        or re-enter the Animator while dispatch is in progress.
        """
        self._event_history.append(event)

        live = [ref() for ref in self._observers]
        self._observers = [ref for ref, obs in zip(self._observers, live) if obs is not None]

        for observer in live:
            if observer is None:
                continue
            method_name = (
                "animator_updated" if event.type is AnimatorEventType.UPDATED else "animator_stopped"
            )
            try:
                getattr(observer, method_name)(animator)
            except Exception as e:
                log.error(
                    f"Observer failed: {type(observer).__name__}.{method_name}",
                    exception=e
                )

        for handler in list(self._handlers[event.type]):
            try:
                handler.callback(event)
            except Exception as e:
                log.error(
                    f"Callback failed: {getattr(handler.callback, '__name__', repr(handler.callback))} "
                    f"for {event.type.name}",
                    exception=e
                )

    # === History ===

    def get_event_history(self, limit: int = 10) -> List[AnimatorEvent]:
        """
        Get recent events from history

        Args:
            limit: Number of recent events to return

        Returns:
            List of recent events (newest last)
        """
        return list(self._event_history)[-limit:]

    def clear_history(self) -> None:
        """Clear event history"""
        self._event_history.clear()
