"""Per-pattern load adjustment — one weight multiplier per classified pattern.

Each pattern picks the session its targets are based on and the factor
applied to every set position of that session:

    progressive_overload  1 + min(slope / last top set, cap)
    rep_cycling           same rule inside the next cluster, or a flat bump
                          when the cluster has fewer than two sessions
    deload                1 − MAX_DECREASE
    stable                1 + SMALL_BUMP for a fully completed straight-across
                          session, else 1
    fallback              1

The cap is MAX_INCREASE_COMPOUND or MAX_INCREASE_ISOLATION.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping, Sequence

from suggestion_engine.math.regression import fit_linear_trend, relative_increase
from suggestion_engine.models.analysis import PatternAnalysis
from suggestion_engine.models.data_point import ExerciseDataPoint, SetPositionData
from suggestion_engine.models.enums import (
    MAX_DECREASE,
    MAX_INCREASE_COMPOUND,
    MAX_INCREASE_ISOLATION,
    MIN_CLUSTER_SESSIONS,
    SMALL_BUMP_PERCENT,
    PatternType,
    SetArrangement,
)
from suggestion_engine.models.exercise import ExerciseInfo


def max_increase(exercise: ExerciseInfo) -> float:
    """Per-session increase cap for the exercise's classification."""
    return MAX_INCREASE_COMPOUND if exercise.is_compound else MAX_INCREASE_ISOLATION


def capped_trend_factor(pool: Sequence[ExerciseDataPoint], cap: float) -> float:
    """Multiplier implied by the top-set trend of ``pool``, capped at ``cap``."""
    trend = fit_linear_trend([p.top_set_weight for p in pool])
    return 1.0 + min(relative_increase(trend.slope, pool[-1].top_set_weight), cap)


def _progressive_overload(analysis: PatternAnalysis, exercise: ExerciseInfo) -> float:
    if not analysis.data_points or analysis.slope is None:
        return 1.0
    implied = relative_increase(analysis.slope, analysis.data_points[-1].top_set_weight)
    return 1.0 + min(implied, max_increase(exercise))


def _rep_cycling(analysis: PatternAnalysis, exercise: ExerciseInfo) -> float:
    if analysis.clusters is None:
        return 1.0
    pool = analysis.clusters.next_pool
    if len(pool) >= MIN_CLUSTER_SESSIONS:
        return capped_trend_factor(pool, max_increase(exercise))
    return 1.0 + SMALL_BUMP_PERCENT


def _deload(analysis: PatternAnalysis, exercise: ExerciseInfo) -> float:
    return 1.0 - MAX_DECREASE


def _stable(analysis: PatternAnalysis, exercise: ExerciseInfo) -> float:
    if not analysis.data_points:
        return 1.0
    if (
        analysis.set_pattern == SetArrangement.STRAIGHT_ACROSS
        and analysis.data_points[-1].all_sets_completed
    ):
        return 1.0 + SMALL_BUMP_PERCENT
    return 1.0


def _fallback(analysis: PatternAnalysis, exercise: ExerciseInfo) -> float:
    return 1.0


_FACTOR_BY_PATTERN: Mapping[PatternType, Callable[[PatternAnalysis, ExerciseInfo], float]] = (
    MappingProxyType({
        PatternType.PROGRESSIVE_OVERLOAD: _progressive_overload,
        PatternType.REP_CYCLING: _rep_cycling,
        PatternType.DELOAD: _deload,
        PatternType.STABLE: _stable,
        PatternType.FALLBACK: _fallback,
    })
)


def weight_factor(analysis: PatternAnalysis, exercise: ExerciseInfo) -> float:
    """Weight multiplier for the next session under ``analysis``."""
    return _FACTOR_BY_PATTERN[analysis.pattern](analysis, exercise)


def base_set_details(
    analysis: PatternAnalysis,
    last_set_details: Sequence[SetPositionData],
) -> tuple[SetPositionData, ...]:
    """The set ladder the targets are derived from.

    Rep cycling works from the most recent session of the cluster the next
    session belongs to; every other pattern from the most recent session.
    """
    if analysis.pattern == PatternType.REP_CYCLING and analysis.clusters is not None:
        pool = analysis.clusters.next_pool
        if pool and pool[-1].set_details:
            return pool[-1].set_details
    return tuple(last_set_details)
