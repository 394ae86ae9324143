"""
DimensionState — Timing and progress record for one animated dimension.

Records are immutable. The Animator never edits a stored record in place:
it reads the record, derives a new one (advanced() / settled()) and writes
it back into its state store in a single assignment.

Lifecycle per dimension:
    Unarmed → Running (enabled, 0 <= phase < 1) → Settled (disabled, phase == 1)
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Optional

from chart_animator.models.easing import EasingFunction


@dataclass(frozen=True)
class DimensionState:
    """
    Runtime state for a single dimension's animation.

    Attributes:
        phase: Normalized progress in [0, 1] (1.0 = complete)
        duration: Total animation length in seconds (>= 0)
        start_time: Clock reading when the dimension was armed
        end_time: start_time + duration
        enabled: Whether ticks still advance this dimension
        easing: Optional curve (elapsed, duration) -> progress; None = linear
    """

    phase: float = 1.0
    duration: float = 0.0
    start_time: float = 0.0
    end_time: float = 0.0
    enabled: bool = False
    easing: Optional[EasingFunction] = field(default=None, compare=False)

    @classmethod
    def armed(
        cls,
        start_time: float,
        duration: float,
        easing: Optional[EasingFunction] = None,
    ) -> DimensionState:
        """
        Create a fresh record for a dimension starting at start_time.

        A zero duration yields an already settled record.
        """
        if duration <= 0:
            return cls(
                phase=1.0,
                duration=0.0,
                start_time=start_time,
                end_time=start_time,
                enabled=False,
                easing=easing,
            )
        return cls(
            phase=0.0,
            duration=duration,
            start_time=start_time,
            end_time=start_time + duration,
            enabled=True,
            easing=easing,
        )

    @property
    def is_settled(self) -> bool:
        return self.phase >= 1.0 and not self.enabled

    def advanced(self, current_time: float) -> DimensionState:
        """
        Compute the record for current_time.

        The phase is derived from the clamped elapsed time, never
        incrementally, so missed or irregular ticks do not accumulate error.
        Disabled records are returned unchanged.
        """
        if not self.enabled or self.duration <= 0:
            return self

        elapsed = min(max(current_time - self.start_time, 0.0), self.duration)
        if self.easing is not None:
            phase = self.easing(elapsed, self.duration)
        else:
            phase = elapsed / self.duration
        phase = min(max(phase, 0.0), 1.0)

        if elapsed >= self.duration or phase >= 1.0:
            return self.settled()
        return replace(self, phase=phase)

    def disabled(self) -> DimensionState:
        """Stop advancing this record, keeping its current phase."""
        return replace(self, enabled=False)

    def settled(self) -> DimensionState:
        """Force the terminal state (phase 1.0, disabled)."""
        return replace(self, phase=1.0, enabled=False)
