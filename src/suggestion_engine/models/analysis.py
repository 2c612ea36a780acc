"""Pattern classifier output."""

from __future__ import annotations

from dataclasses import dataclass, field

from suggestion_engine.models.data_point import ExerciseDataPoint
from suggestion_engine.models.enums import PatternType, SetArrangement


@dataclass(frozen=True)
class ClusterData:
    """Heavy/light split of a dual-progression history.

    Both bands keep chronological order. ``next_is_heavy`` is re-derived from
    the series on every call; it is never stored between calls.
    """

    heavy: tuple[ExerciseDataPoint, ...]
    light: tuple[ExerciseDataPoint, ...]
    next_is_heavy: bool

    @property
    def next_pool(self) -> tuple[ExerciseDataPoint, ...]:
        """The band the next session belongs to."""
        return self.heavy if self.next_is_heavy else self.light


@dataclass(frozen=True)
class PatternAnalysis:
    """Classified training pattern for one exercise.

    ``slope`` and ``r_squared`` are present only when a regression was run;
    ``clusters`` only for rep cycling.
    """

    pattern: PatternType
    confidence: float = 0.0
    data_points: tuple[ExerciseDataPoint, ...] = field(default_factory=tuple)
    slope: float | None = None
    r_squared: float | None = None
    clusters: ClusterData | None = None
    set_pattern: SetArrangement | None = None

    @property
    def is_fallback(self) -> bool:
        return self.pattern == PatternType.FALLBACK
