"""
Tests for tick sources (ManualTickSource, FrameTicker).
"""

import asyncio

import pytest

from chart_animator.engine import Animator, FrameTicker, ManualTickSource, TickHandle
from chart_animator.models.enums import Dimension


class TestManualTickSource:

    def test_tick_invokes_each_subscriber_once(self):
        ticks = ManualTickSource()
        calls = []
        ticks.subscribe(lambda: calls.append("a"))
        ticks.subscribe(lambda: calls.append("b"))

        assert ticks.tick() == 2
        assert calls == ["a", "b"]
        assert ticks.ticks_delivered == 1

    def test_unsubscribe(self):
        ticks = ManualTickSource()
        calls = []
        handle = ticks.subscribe(lambda: calls.append(1))
        ticks.unsubscribe(handle)

        ticks.tick()
        assert calls == []
        assert ticks.subscriber_count == 0

    def test_unsubscribe_unknown_handle_is_ignored(self):
        ticks = ManualTickSource()
        handle = ticks.subscribe(lambda: None)
        ticks.unsubscribe(handle)
        ticks.unsubscribe(handle)
        ticks.unsubscribe(TickHandle(999))

        assert ticks.subscriber_count == 0
        assert ticks.unsubscribe_calls == 3

    def test_handles_are_unique(self):
        ticks = ManualTickSource()
        a = ticks.subscribe(lambda: None)
        b = ticks.subscribe(lambda: None)

        assert a != b

    def test_subscriber_removed_during_tick_is_skipped(self):
        ticks = ManualTickSource()
        calls = []
        handles = {}

        def first():
            calls.append("first")
            ticks.unsubscribe(handles["second"])

        handles["first"] = ticks.subscribe(first)
        handles["second"] = ticks.subscribe(lambda: calls.append("second"))

        ticks.tick()
        assert calls == ["first"]

    def test_failing_subscriber_does_not_block_others(self):
        ticks = ManualTickSource()
        calls = []

        def broken():
            raise RuntimeError("boom")

        ticks.subscribe(broken)
        ticks.subscribe(lambda: calls.append("ok"))

        ticks.tick()
        assert calls == ["ok"]


class TestFrameTicker:

    def test_fps_is_clamped(self):
        assert FrameTicker(fps=1000).fps == 240
        assert FrameTicker(fps=0).fps == 1

        ticker = FrameTicker(fps=30)
        ticker.set_fps(500)
        assert ticker.fps == 240

    def test_subscribe_requires_running_loop(self):
        ticker = FrameTicker()
        with pytest.raises(RuntimeError):
            ticker.subscribe(lambda: None)
        assert ticker.subscriber_count == 0

    def test_idle_ticker_has_no_task(self):
        ticker = FrameTicker()
        assert ticker.render_task is None
        assert not ticker.running

    @pytest.mark.asyncio
    async def test_ticks_while_subscribed(self):
        ticker = FrameTicker(fps=240)
        calls = []
        handle = ticker.subscribe(lambda: calls.append(1))
        assert ticker.running

        await asyncio.sleep(0.1)
        assert len(calls) > 0

        ticker.unsubscribe(handle)
        assert not ticker.running
        assert ticker.render_task is None

        delivered = len(calls)
        await asyncio.sleep(0.05)
        assert len(calls) == delivered

        await ticker.close()

    @pytest.mark.asyncio
    async def test_last_subscriber_leaving_during_tick(self):
        ticker = FrameTicker(fps=240)
        calls = []
        holder = {}

        def once():
            calls.append(1)
            ticker.unsubscribe(holder["handle"])

        holder["handle"] = ticker.subscribe(once)
        await asyncio.sleep(0.05)

        assert calls == [1]
        assert not ticker.running

    @pytest.mark.asyncio
    async def test_resubscribe_restarts_loop(self):
        ticker = FrameTicker(fps=240)
        handle = ticker.subscribe(lambda: None)
        ticker.unsubscribe(handle)

        calls = []
        ticker.subscribe(lambda: calls.append(1))
        await asyncio.sleep(0.05)

        assert ticker.running
        assert len(calls) > 0
        await ticker.close()
        assert ticker.subscriber_count == 0

    @pytest.mark.asyncio
    async def test_pause_and_step(self):
        ticker = FrameTicker(fps=240)
        ticker.pause()
        calls = []
        ticker.subscribe(lambda: calls.append(1))

        await asyncio.sleep(0.05)
        assert calls == []

        ticker.step_frame()
        await asyncio.sleep(0.05)
        assert calls == [1]

        ticker.resume()
        await asyncio.sleep(0.05)
        assert len(calls) > 1

        await ticker.close()

    @pytest.mark.asyncio
    async def test_metrics(self):
        ticker = FrameTicker(fps=120)
        ticker.subscribe(lambda: None)
        await asyncio.sleep(0.1)

        metrics = ticker.get_metrics()
        assert metrics["fps_target"] == 120
        assert metrics["ticks_delivered"] > 0
        assert metrics["subscribers"] == 1
        assert "FrameTicker(" in repr(ticker)

        await ticker.close()

    @pytest.mark.asyncio
    async def test_drives_animator_to_completion(self):
        ticker = FrameTicker(fps=240)
        animator = Animator(ticker)
        stopped = asyncio.Event()
        updates = []
        animator.notifier.on_updated(lambda event: updates.append(event.phase(Dimension.X)))
        animator.notifier.on_stopped(lambda event: stopped.set())

        animator.animate(Dimension.X, 0.1)
        await asyncio.wait_for(stopped.wait(), timeout=2.0)

        assert animator.phase_x == 1.0
        assert not animator.is_running
        assert ticker.subscriber_count == 0
        assert updates == sorted(updates)
        assert updates[-1] == 1.0

        await ticker.close()
