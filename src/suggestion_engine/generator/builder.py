"""SuggestionBuilder — turns a PatternAnalysis into concrete per-set targets.

For each set position the builder takes the base session's value at that
position, applies the pattern's weight factor, rounds through the
equipment's increment policy, and clamps reps to [MIN_REPS, MAX_REPS].
A deload takes the lightest loadable value within MAX_DECREASE of the last
weight rather than rounding the reduced weight down.
Positions beyond the base session repeat the last rounded target.
"""

from __future__ import annotations

import logging
from typing import Sequence

from suggestion_engine import config
from suggestion_engine.generator.adjustments import base_set_details, weight_factor
from suggestion_engine.generator.defaults import default_sets
from suggestion_engine.math.rounding import (
    WeightIncrement,
    get_weight_increment,
    reduce_within,
    round_to_increment,
)
from suggestion_engine.models.analysis import PatternAnalysis
from suggestion_engine.models.data_point import SetPositionData
from suggestion_engine.models.enums import MAX_DECREASE, MAX_REPS, MIN_REPS, ExerciseType, PatternType
from suggestion_engine.models.exercise import ExerciseInfo
from suggestion_engine.models.history import SetLog
from suggestion_engine.models.suggestion import SmartSuggestionResult

logger = logging.getLogger(__name__)


def clamp_reps(reps: float) -> int:
    """Round and clamp a rep target to [MIN_REPS, MAX_REPS]."""
    return max(MIN_REPS, min(MAX_REPS, int(round(reps))))


def increment_policy(exercise: ExerciseInfo) -> WeightIncrement:
    """Increment policy for an exercise; bare bodyweight moves use the fine policy."""
    if not exercise.equipment and exercise.is_bodyweight:
        return get_weight_increment(("Bodyweight",))
    return get_weight_increment(exercise.equipment)


def to_set_log(weight: float, reps: int, exercise_type: ExerciseType) -> SetLog:
    """Shape a (weight, reps) target like a logged set of the given type."""
    if exercise_type == ExerciseType.ASSISTED:
        return SetLog(assistance_weight=weight, reps=reps)
    if exercise_type in (ExerciseType.BODYWEIGHT, ExerciseType.REPS_ONLY):
        return SetLog(weight=weight if weight > 0 else None, reps=reps)
    return SetLog(weight=weight, reps=reps)


def set_weight(target: SetLog) -> float:
    """The load carried by a target, whichever field the exercise type uses."""
    if target.weight is not None:
        return target.weight
    if target.assistance_weight is not None:
        return target.assistance_weight
    return 0.0


class SuggestionBuilder:
    """Builds SmartSuggestionResults from classified patterns.

    Usage::

        builder = SuggestionBuilder()
        result = builder.build(analysis, exercise, last_set_details, requested_sets=4)
    """

    def build(
        self,
        analysis: PatternAnalysis,
        exercise: ExerciseInfo,
        last_set_details: Sequence[SetPositionData],
        requested_sets: int | None = None,
    ) -> SmartSuggestionResult:
        """Build next-session targets.

        Args:
            analysis: Classifier output for the exercise.
            exercise: Catalog entry (type, compound flag, equipment).
            last_set_details: The most recent session's completed sets.
            requested_sets: Number of sets wanted; defaults to the base
                session's set count (or DEFAULT_SET_COUNT without history).

        Returns:
            SmartSuggestionResult with one incomplete SetLog per set.
        """
        base = base_set_details(analysis, last_set_details)

        if not exercise.supports_progression or not base:
            count = requested_sets if requested_sets is not None else config.DEFAULT_SET_COUNT
            logger.debug("No usable history for %s; using static defaults", exercise.name)
            return SmartSuggestionResult(
                sets=default_sets(exercise, count),
                history_set_count=0,
                pattern=PatternType.FALLBACK,
                confidence=0.0,
                data_points=analysis.data_points,
            )

        count = requested_sets if requested_sets is not None else len(base)
        # Assistance load progresses downwards; carry it forward untouched
        if exercise.exercise_type == ExerciseType.ASSISTED:
            factor = 1.0
        else:
            factor = weight_factor(analysis, exercise)
        policy = increment_policy(exercise)

        targets: list[SetLog] = []
        for position in range(count):
            if position < len(base):
                source = base[position]
                weight = source.weight
                if analysis.pattern == PatternType.DELOAD and factor < 1.0:
                    weight = reduce_within(source.weight, MAX_DECREASE, policy)
                elif factor != 1.0:
                    weight = round_to_increment(source.weight * factor, policy)
                targets.append(
                    to_set_log(weight, clamp_reps(source.reps), exercise.exercise_type)
                )
            else:
                targets.append(targets[-1])

        logger.debug(
            "Built %d targets for %s (%s, factor %.4f)",
            len(targets),
            exercise.name,
            analysis.pattern.name,
            factor,
        )
        return SmartSuggestionResult(
            sets=tuple(targets),
            history_set_count=min(count, len(base)),
            pattern=analysis.pattern,
            confidence=analysis.confidence,
            clusters=analysis.clusters,
            set_pattern=analysis.set_pattern,
            data_points=analysis.data_points,
        )


def build_suggestion(
    analysis: PatternAnalysis,
    exercise: ExerciseInfo,
    last_set_details: Sequence[SetPositionData],
    requested_sets: int | None = None,
) -> SmartSuggestionResult:
    """Functional shorthand for ``SuggestionBuilder().build(...)``."""
    return SuggestionBuilder().build(analysis, exercise, last_set_details, requested_sets)
