"""Smart suggestion output — what the host application renders as targets."""

from __future__ import annotations

from dataclasses import dataclass, field

from suggestion_engine.models.analysis import ClusterData
from suggestion_engine.models.data_point import ExerciseDataPoint
from suggestion_engine.models.enums import PatternType, SetArrangement
from suggestion_engine.models.history import SetLog


@dataclass(frozen=True)
class SmartSuggestionResult:
    """Suggested per-set targets for the next session of one exercise.

    ``history_set_count`` counts the leading sets backed by a real historical
    set; any sets after that are padding. ``data_points`` is the analysed
    series, passed through so the intra-session adapter can compare live sets
    against history.
    """

    sets: tuple[SetLog, ...]
    history_set_count: int
    pattern: PatternType
    confidence: float = 0.0
    clusters: ClusterData | None = None
    set_pattern: SetArrangement | None = None
    data_points: tuple[ExerciseDataPoint, ...] = field(default_factory=tuple)
