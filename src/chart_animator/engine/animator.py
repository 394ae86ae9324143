"""
Animator — Phase engine for chart reveal animations.

Converts clock time into a normalized phase per Dimension. A renderer polls
phase(dimension) during its draw pass and interpolates between its start
and end drawing states.

Flow:
  animate(dim, duration, easing)
    → record replaced, phases computed for "now"
    → tick source subscribed (only while some dimension is enabled)
  each tick
    → enabled dimensions recomputed, one UPDATED notification
    → stop() once the clock passes the latest end time
  stop()
    → tick source released, unfinished dimensions forced to 1.0
    → UPDATED (only if something was unfinished), then STOPPED

Single-threaded: ticks must arrive on the same loop/thread that calls
animate() and stop().
"""

from __future__ import annotations
import time
import weakref
from typing import Callable, Dict, Mapping, Optional, Union

from chart_animator.engine.tick_source import TickHandle, TickSource
from chart_animator.models.config import AnimatorConfig
from chart_animator.models.dimension_state import DimensionState
from chart_animator.models.easing import EasingFunction, easing_function_from_option
from chart_animator.models.enums import Dimension, EasingOption, LogCategory
from chart_animator.models.events import AnimatorStoppedEvent, AnimatorUpdatedEvent
from chart_animator.services.notifier import AnimatorNotifier, AnimatorObserver
from chart_animator.utils.logger import get_logger

log = get_logger().for_category(LogCategory.ANIMATOR)

Easing = Union[EasingFunction, EasingOption, None]


class _DefaultEasing:
    """Sentinel: use the configured default preset"""

    def __repr__(self) -> str:
        return "DEFAULT_EASING"


DEFAULT_EASING = _DefaultEasing()


def _weak_tick(animator: "Animator") -> Callable[[], None]:
    """
    Tick callback that does not keep the animator alive.

    The tick source only holds this closure; once the animator is garbage
    collected the callback turns into a no-op.
    """
    ref = weakref.ref(animator)

    def tick() -> None:
        target = ref()
        if target is not None:
            target._on_tick()

    return tick


class Animator:
    """
    Per-dimension animation phase engine.

    Example:
        ticker = FrameTicker(fps=60)
        animator = Animator(ticker)
        animator.notifier.add_observer(chart_view)

        animator.animate_xy(1.0, 1.5)            # default easing (config)
        animator.animate(Dimension.H, 0.8, EasingOption.EASE_OUT_BOUNCE)

        # in chart_view.draw():
        width = full_width * animator.phase_x
    """

    def __init__(
        self,
        tick_source: TickSource,
        clock: Callable[[], float] = time.perf_counter,
        config: Optional[AnimatorConfig] = None,
        notifier: Optional[AnimatorNotifier] = None,
    ):
        """
        Initialize Animator.

        Args:
            tick_source: Periodic callback source (FrameTicker, ManualTickSource)
            clock: Monotonic time source in seconds
            config: Engine settings (default easing for animate_x/y/xy)
            notifier: Notification hub (a fresh one is created if omitted)
        """
        self.tick_source = tick_source
        self.clock = clock
        self.config = config or AnimatorConfig()
        self.notifier = notifier or AnimatorNotifier()

        self._states: Dict[Dimension, DimensionState] = {}
        self._tick_handle: Optional[TickHandle] = None
        self._observer_ref: Optional[weakref.ref] = None

    # === Observer shortcuts ===

    @property
    def observer(self) -> Optional[AnimatorObserver]:
        """
        Single delegate slot (weakly referenced).

        Assigning replaces any observer previously set through this property;
        observers added through notifier.add_observer() are unaffected.
        """
        return self._observer_ref() if self._observer_ref is not None else None

    @observer.setter
    def observer(self, observer: Optional[AnimatorObserver]) -> None:
        previous = self.observer
        if previous is not None:
            self.notifier.remove_observer(previous)
        if observer is None:
            self._observer_ref = None
            return
        self._observer_ref = weakref.ref(observer)
        self.notifier.add_observer(observer)

    # === Phase queries ===

    def phase(self, dimension: Dimension) -> float:
        """Current phase of dimension; 1.0 (fully settled) if never armed."""
        state = self._states.get(dimension)
        return state.phase if state is not None else 1.0

    @property
    def phase_x(self) -> float:
        """The phase that influences the drawn values on the x-axis"""
        return self.phase(Dimension.X)

    @property
    def phase_y(self) -> float:
        """The phase that influences the drawn values on the y-axis"""
        return self.phase(Dimension.Y)

    @property
    def is_running(self) -> bool:
        """True while the tick source subscription is held"""
        return self._tick_handle is not None

    def states(self) -> Mapping[Dimension, DimensionState]:
        """Snapshot of the state store"""
        return dict(self._states)

    # === Arming ===

    def animate(self, dimension: Dimension, duration: float, easing: Easing = None) -> None:
        """
        (Re)arm one dimension.

        Other dimensions are left untouched.

        Args:
            dimension: Which dimension to animate
            duration: Seconds; negative values are clamped to 0
            easing: Easing function, EasingOption preset, or None for linear
        """
        if duration < 0:
            log.warn("Negative duration clamped to 0", dimension=dimension.name, duration=duration)
            duration = 0.0

        start_time = self.clock()
        self._states[dimension] = DimensionState.armed(start_time, duration, self._resolve(easing))

        log.debug(
            "Dimension armed",
            dimension=dimension.name,
            duration=duration,
            easing=self._easing_name(easing),
        )

        # Correct first frame for a renderer polling before the first tick
        self._update_phases(start_time)

        if self._has_enabled_animations() and self._tick_handle is None:
            self._tick_handle = self.tick_source.subscribe(_weak_tick(self))
            log.debug("Tick source subscribed")

    def animate_x(self, duration: float, easing: Union[Easing, _DefaultEasing] = DEFAULT_EASING) -> None:
        """Animate the x-axis only."""
        self.animate(Dimension.X, duration, self._default(easing))

    def animate_y(self, duration: float, easing: Union[Easing, _DefaultEasing] = DEFAULT_EASING) -> None:
        """Animate the y-axis only."""
        self.animate(Dimension.Y, duration, self._default(easing))

    def animate_xy(
        self,
        x_duration: float,
        y_duration: float,
        easing_x: Union[Easing, _DefaultEasing] = DEFAULT_EASING,
        easing_y: Union[Easing, _DefaultEasing] = DEFAULT_EASING,
        easing: Union[Easing, _DefaultEasing] = DEFAULT_EASING,
    ) -> None:
        """
        Animate both axes, cancelling any animation in flight first.

        Args:
            x_duration: Duration for the x-axis
            y_duration: Duration for the y-axis
            easing_x: Easing for the x-axis
            easing_y: Easing for the y-axis
            easing: Shared easing for both axes (used where easing_x/easing_y
                are left at their default)
        """
        if easing_x is DEFAULT_EASING:
            easing_x = easing
        if easing_y is DEFAULT_EASING:
            easing_y = easing

        self.stop()

        self.animate(Dimension.X, x_duration, self._default(easing_x))
        self.animate(Dimension.Y, y_duration, self._default(easing_y))

    # === Lifecycle ===

    def stop(self) -> None:
        """
        Stop animating and settle everything.

        No-op unless the tick source is subscribed. The handle is cleared
        before any notification fires, so calling stop() from a handler
        does nothing.

        STOPPED is only sent while idle: if an UPDATED handler re-arms a
        dimension during the forced update, the new run owns the
        subscription and its own stop() sends STOPPED.
        """
        if self._tick_handle is None:
            return

        handle = self._tick_handle
        self._tick_handle = None
        self.tick_source.unsubscribe(handle)

        self._disable_all_animations()

        # Never leave an interrupted animation half drawn
        forced = self._has_unfinished_animations()
        if forced:
            self._finish_all_animations()
            self.notifier.dispatch(AnimatorUpdatedEvent(self._phases()), self)

            if self._tick_handle is not None:
                log.debug("Re-armed during forced update, STOPPED deferred", phases=self._phases())
                return

        log.info("Animator stopped", forced=forced, phases=self._phases())
        self.notifier.dispatch(AnimatorStoppedEvent(self._phases()), self)

    def close(self) -> None:
        """Release the tick source. The animator stays usable afterwards."""
        self.stop()

    def __enter__(self) -> "Animator":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __del__(self):
        # Partially constructed instances have no handle attribute
        if getattr(self, "_tick_handle", None) is not None:
            self.stop()

    # === Tick handling ===

    def _on_tick(self) -> None:
        current_time = self.clock()

        self._update_phases(current_time)
        self.notifier.dispatch(AnimatorUpdatedEvent(self._phases()), self)

        # A handler may have stopped or re-armed us
        if self._tick_handle is not None and (
            current_time >= self._end_time() or not self._has_enabled_animations()
        ):
            self.stop()

    def _update_phases(self, current_time: float) -> None:
        for dimension, state in list(self._states.items()):
            if not state.enabled:
                continue
            self._states[dimension] = state.advanced(current_time)

    # === Helpers ===

    def _end_time(self) -> float:
        return max((s.end_time for s in self._states.values()), default=0.0)

    def _has_enabled_animations(self) -> bool:
        return any(s.enabled for s in self._states.values())

    def _has_unfinished_animations(self) -> bool:
        return any(s.phase < 1.0 for s in self._states.values())

    def _disable_all_animations(self) -> None:
        for dimension, state in list(self._states.items()):
            self._states[dimension] = state.disabled()

    def _finish_all_animations(self) -> None:
        for dimension, state in list(self._states.items()):
            self._states[dimension] = state.settled()

    def _phases(self) -> Dict[Dimension, float]:
        return {dimension: state.phase for dimension, state in self._states.items()}

    def _default(self, easing: Union[Easing, _DefaultEasing]) -> Easing:
        if easing is DEFAULT_EASING:
            return self.config.default_easing
        return easing

    @staticmethod
    def _resolve(easing: Easing) -> Optional[EasingFunction]:
        if isinstance(easing, EasingOption):
            return easing_function_from_option(easing)
        return easing

    @staticmethod
    def _easing_name(easing: Easing) -> str:
        if easing is None:
            return "linear"
        if isinstance(easing, EasingOption):
            return easing.name
        return getattr(easing, "__name__", repr(easing))

    def __repr__(self) -> str:
        phases = ", ".join(f"{d.name}={s.phase:.3f}" for d, s in self._states.items())
        return f"Animator(running={self.is_running}, {phases or 'idle'})"
