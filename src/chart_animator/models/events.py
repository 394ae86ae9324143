"""
Animator notification events

Each notification dispatched by the Animator is described by an
AnimatorEvent carrying a snapshot of the phases at dispatch time.
"""

from dataclasses import dataclass, field
import time
from typing import Dict

from chart_animator.models.enums import AnimatorEventType, Dimension


@dataclass(frozen=True)
class AnimatorEvent:
    """
    Base animator event

    Attributes:
        type: UPDATED or STOPPED
        phases: Phase per armed dimension at dispatch time
        timestamp: Wall-clock time of dispatch (time.time())
    """
    type: AnimatorEventType
    phases: Dict[Dimension, float] = field(default_factory=dict)
    timestamp: float = field(default_factory=time.time)

    def phase(self, dimension: Dimension) -> float:
        """Phase of dimension in this snapshot (1.0 if it was never armed)"""
        return self.phases.get(dimension, 1.0)


class AnimatorUpdatedEvent(AnimatorEvent):
    """Phases were recomputed"""

    def __init__(self, phases: Dict[Dimension, float]):
        super().__init__(type=AnimatorEventType.UPDATED, phases=dict(phases))


class AnimatorStoppedEvent(AnimatorEvent):
    """Animator released its tick source and is idle"""

    def __init__(self, phases: Dict[Dimension, float]):
        super().__init__(type=AnimatorEventType.STOPPED, phases=dict(phases))
