"""
Shared fixtures: fake clock, manual tick source, animator, recording observer.
"""

import pytest

from chart_animator.engine import Animator, ManualTickSource
from chart_animator.models.config import AnimatorConfig
from chart_animator.models.enums import EasingOption, LogLevel
from chart_animator.utils.logger import configure_logger


class FakeClock:
    """Deterministic clock; time only moves on advance()."""

    def __init__(self, now: float = 100.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now


class RecordingObserver:
    """Observer that records notifications (and the phases seen at that moment)."""

    def __init__(self):
        self.events = []
        self.phases = []

    def animator_updated(self, animator):
        self.events.append("updated")
        self.phases.append((animator.phase_x, animator.phase_y))

    def animator_stopped(self, animator):
        self.events.append("stopped")

    def clear(self):
        self.events.clear()
        self.phases.clear()


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep test output readable and undo logger changes made by a test."""
    configure_logger(LogLevel.WARN, use_colors=False)
    yield
    configure_logger(LogLevel.WARN, use_colors=False)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ticks():
    return ManualTickSource()


@pytest.fixture
def config():
    return AnimatorConfig(default_easing=EasingOption.EASE_IN_QUAD)


@pytest.fixture
def animator(ticks, clock, config):
    return Animator(ticks, clock=clock, config=config)


@pytest.fixture
def observer(animator):
    obs = RecordingObserver()
    animator.observer = obs
    return obs
