"""Caller-owned state for intra-session adaptation and the adapter's result."""

from __future__ import annotations

from dataclasses import dataclass, field

from suggestion_engine.models.data_point import ExerciseDataPoint
from suggestion_engine.models.enums import PatternType, ShiftKind
from suggestion_engine.models.exercise import ExerciseInfo
from suggestion_engine.models.history import SetLog


@dataclass(frozen=True)
class IntraSessionState:
    """Everything the adapter needs to know about the live session.

    The host keeps this between calls and passes the ``session_state``
    returned in each PatternShiftResult into the next call. The engine never
    stores it. ``pattern_shifts`` counts full reclassifications so far.
    """

    exercise: ExerciseInfo
    pattern: PatternType = PatternType.FALLBACK
    history: tuple[ExerciseDataPoint, ...] = field(default_factory=tuple)
    completed: tuple[tuple[SetLog, SetLog], ...] = field(default_factory=tuple)
    pattern_shifts: int = 0

    @property
    def completed_count(self) -> int:
        return len(self.completed)


@dataclass(frozen=True)
class PatternShiftResult:
    """Replacement targets for every not-yet-completed set.

    ``new_targets`` is indexed from the first incomplete set and is empty
    when ``shifted`` is False.
    """

    shifted: bool
    new_targets: tuple[SetLog, ...] = field(default_factory=tuple)
    kind: ShiftKind = ShiftKind.NONE
    session_state: IntraSessionState | None = None
