"""Per-session summary of one exercise, derived fresh from history each call."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class SetPositionData:
    """Weight and reps at one set position (index = order performed)."""

    weight: float
    reps: int


@dataclass(frozen=True)
class ExerciseDataPoint:
    """One historical session's summary for one exercise.

    Attributes:
        date: When the session took place.
        avg_weight: Mean weight across completed sets.
        avg_reps: Mean reps across completed sets.
        top_set_weight: Heaviest completed set's weight.
        top_set_reps: Reps performed on the heaviest set (first occurrence).
        total_sets: Number of completed sets.
        total_volume: Sum of weight × reps over completed sets.
        set_details: Completed sets in the order performed.
        all_sets_completed: True when no logged set of the exercise was left
            incomplete in that session.
    """

    date: datetime
    avg_weight: float
    avg_reps: float
    top_set_weight: float
    top_set_reps: int
    total_sets: int
    total_volume: float
    set_details: tuple[SetPositionData, ...] = field(default_factory=tuple)
    all_sets_completed: bool = True
