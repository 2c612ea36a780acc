"""Frozen classification context — the sole input to every pattern rule."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from functools import cached_property

from suggestion_engine.clock import days_between
from suggestion_engine.math.regression import LinearTrend, fit_linear_trend, population_stddev
from suggestion_engine.models.data_point import ExerciseDataPoint
from suggestion_engine.models.exercise import ExerciseInfo


@dataclass(frozen=True)
class ClassificationContext:
    """Immutable snapshot of one exercise's series at classification time.

    Derived statistics are computed lazily and at most once per context, so
    rules that share them (the trend regression, for instance) do not repeat
    the work.
    """

    points: tuple[ExerciseDataPoint, ...]
    exercise: ExerciseInfo
    now: datetime

    @property
    def n_points(self) -> int:
        return len(self.points)

    @property
    def last(self) -> ExerciseDataPoint:
        return self.points[-1]

    @cached_property
    def days_since_last(self) -> float:
        if not self.points:
            return float("inf")
        return days_between(self.last.date, self.now)

    @cached_property
    def history_span_days(self) -> float:
        if len(self.points) < 2:
            return 0.0
        return days_between(self.points[0].date, self.last.date)

    @cached_property
    def top_set_trend(self) -> LinearTrend:
        """OLS trend of top-set weight against session index."""
        return fit_linear_trend([p.top_set_weight for p in self.points])

    @cached_property
    def rep_stddev(self) -> float:
        return population_stddev([p.avg_reps for p in self.points])
