"""
Tick sources — periodic callbacks driving the Animator.

TickSource is the port the Animator depends on:
    subscribe(callback) -> TickHandle
    unsubscribe(handle)

Implementations:
  - FrameTicker: asyncio render loop @ target FPS (display refresh stand-in)
  - ManualTickSource: ticks only when tick() is called (tests, offline rendering)

Subscribers are invoked from a snapshot, so a callback may unsubscribe
itself (or subscribe others) while a tick is being delivered.
"""

from __future__ import annotations
import asyncio
import itertools
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Dict, Optional, Protocol

from chart_animator.models.enums import LogCategory
from chart_animator.utils.logger import get_logger

log = get_logger().for_category(LogCategory.TICK)

TickCallback = Callable[[], None]


@dataclass(frozen=True)
class TickHandle:
    """Opaque subscription token returned by subscribe()"""
    id: int


class TickSource(Protocol):
    def subscribe(self, callback: TickCallback) -> TickHandle: ...

    def unsubscribe(self, handle: TickHandle) -> None: ...


class _SubscriberRegistry:
    """Subscriber bookkeeping shared by the tick source implementations"""

    def __init__(self):
        self._subscribers: Dict[int, TickCallback] = {}
        self._ids = itertools.count(1)

    def subscribe(self, callback: TickCallback) -> TickHandle:
        handle = TickHandle(next(self._ids))
        self._subscribers[handle.id] = callback
        log.debug("Tick subscriber added", handle=handle.id, subscribers=len(self._subscribers))
        return handle

    def unsubscribe(self, handle: TickHandle) -> None:
        """Remove a subscriber. Unknown or already removed handles are ignored."""
        if self._subscribers.pop(handle.id, None) is not None:
            log.debug("Tick subscriber removed", handle=handle.id, subscribers=len(self._subscribers))

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _deliver(self) -> int:
        """Invoke every subscriber once. Returns number of callbacks invoked."""
        delivered = 0
        for handle_id, callback in list(self._subscribers.items()):
            # Removed by an earlier callback during this tick
            if handle_id not in self._subscribers:
                continue
            try:
                callback()
            except Exception as e:
                log.error(f"Tick subscriber failed: {e}", handle=handle_id)
            delivered += 1
        return delivered


class ManualTickSource(_SubscriberRegistry):
    """
    Deterministic tick source.

    Nothing happens until tick() is called. Pair with a fake clock to step
    an Animator frame by frame.

    Example:
        ticks = ManualTickSource()
        animator = Animator(ticks, clock=fake_clock)
        animator.animate(Dimension.X, 1.0)
        fake_clock.advance(0.5)
        ticks.tick()
    """

    def __init__(self):
        super().__init__()
        self.subscribe_calls = 0
        self.unsubscribe_calls = 0
        self.ticks_delivered = 0

    def subscribe(self, callback: TickCallback) -> TickHandle:
        self.subscribe_calls += 1
        return super().subscribe(callback)

    def unsubscribe(self, handle: TickHandle) -> None:
        self.unsubscribe_calls += 1
        super().unsubscribe(handle)

    def tick(self) -> int:
        """Deliver one tick to all subscribers"""
        self.ticks_delivered += 1
        return self._deliver()


class FrameTicker(_SubscriberRegistry):
    """
    Asyncio tick source running a render loop at a target FPS.

    The loop task is started lazily on the first subscription and stopped
    as soon as the last subscriber leaves, so an idle ticker holds no task.
    subscribe() must be called with a running event loop.

    Supports pause/step/FPS control for debugging.
    """

    def __init__(self, fps: int = 60):
        """
        Initialize FrameTicker.

        Args:
            fps: Target tick frequency (1-240, default 60)
        """
        super().__init__()
        self.fps = max(1, min(fps, 240))

        # Runtime state
        self.running = False
        self.paused = False
        self.step_requested = False
        self.render_task: Optional[asyncio.Task] = None

        # Timing & performance metrics
        self.frame_times: Deque[float] = deque(maxlen=300)
        self.ticks_delivered = 0

        log.info("FrameTicker initialized", fps=self.fps)

    # === Subscription ===

    def subscribe(self, callback: TickCallback) -> TickHandle:
        # Raises RuntimeError before registering when called outside a loop
        loop = asyncio.get_running_loop()
        handle = super().subscribe(callback)
        self._start(loop)
        return handle

    def unsubscribe(self, handle: TickHandle) -> None:
        super().unsubscribe(handle)
        if not self._subscribers:
            self._halt()

    # === Control API ===

    def pause(self) -> None: self.paused = True

    def resume(self) -> None: self.paused = False

    def step_frame(self) -> None: self.step_requested = True

    def set_fps(self, fps: int) -> None:
        """Change FPS at runtime."""
        self.fps = max(1, min(fps, 240))
        log.info(f"FrameTicker FPS set to {self.fps}")

    # === Lifecycle ===

    def _start(self, loop: asyncio.AbstractEventLoop) -> None:
        if self.running and self.render_task is not None:
            return
        self.running = True
        self.render_task = loop.create_task(self._render_loop())
        log.debug(f"FrameTicker render loop started @ {self.fps} FPS")

    def _halt(self) -> None:
        if not self.running:
            return
        self.running = False
        if self.render_task is not None:
            # May be the running task itself (last subscriber left during a tick);
            # it then exits at its next await.
            self.render_task.cancel()
            self.render_task = None
        log.debug("FrameTicker render loop halted", ticks_delivered=self.ticks_delivered)

    async def close(self) -> None:
        """Drop all subscribers and wait for the render loop to finish."""
        task = self.render_task
        self._subscribers.clear()
        self._halt()
        if task is not None and task is not asyncio.current_task():
            try:
                await task
            except asyncio.CancelledError:
                pass
        log.info("FrameTicker closed", ticks_delivered=self.ticks_delivered)

    # === Metrics ===

    def get_actual_fps(self) -> float:
        """Get measured FPS over recent ticks."""
        if len(self.frame_times) < 2:
            return 0.0
        duration = self.frame_times[-1] - self.frame_times[0]
        if duration <= 0:
            return 0.0
        return len(self.frame_times) / duration

    def get_metrics(self) -> Dict:
        """Get performance metrics."""
        return {
            "fps_target": self.fps,
            "fps_actual": self.get_actual_fps(),
            "ticks_delivered": self.ticks_delivered,
            "subscribers": self.subscriber_count,
        }

    # === Core Render Loop ===

    async def _render_loop(self) -> None:
        """Main loop @ target FPS."""
        while self.running:
            if self.paused and not self.step_requested:
                await asyncio.sleep(0.01)
                continue

            self._deliver()
            self.ticks_delivered += 1
            self.frame_times.append(time.perf_counter())

            self.step_requested = False

            # Frame rate control (re-read so set_fps applies immediately)
            await asyncio.sleep(1.0 / self.fps)

    def __repr__(self) -> str:
        metrics = self.get_metrics()
        return (
            f"FrameTicker(fps={metrics['fps_actual']:.1f}/{metrics['fps_target']}, "
            f"ticks={metrics['ticks_delivered']}, "
            f"subscribers={metrics['subscribers']})"
        )
