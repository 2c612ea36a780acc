"""Static starting sets for exercises with no history at all.

These are a fixed table keyed by exercise type, not derived from any
computation. Cardio and timed exercises always start from zero with a single
set, as do GPS-tracked exercises.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

from suggestion_engine.models.enums import (
    DEFAULT_ASSISTED_REPS,
    DEFAULT_BODYWEIGHT_REPS,
    DEFAULT_WEIGHT_REPS,
    ExerciseType,
)
from suggestion_engine.models.exercise import ExerciseInfo
from suggestion_engine.models.history import SetLog


def _weighted(count: int) -> tuple[SetLog, ...]:
    return tuple(SetLog(weight=0.0, reps=DEFAULT_WEIGHT_REPS) for _ in range(count))


def _reps_only(count: int) -> tuple[SetLog, ...]:
    return tuple(SetLog(reps=DEFAULT_BODYWEIGHT_REPS) for _ in range(count))


def _assisted(count: int) -> tuple[SetLog, ...]:
    return tuple(
        SetLog(assistance_weight=0.0, reps=DEFAULT_ASSISTED_REPS) for _ in range(count)
    )


def _cardio(_: int) -> tuple[SetLog, ...]:
    return (SetLog(duration=0.0, distance=0.0),)


def _timed(_: int) -> tuple[SetLog, ...]:
    return (SetLog(duration=0.0),)


_DEFAULTS_BY_TYPE: Mapping[ExerciseType, Callable[[int], tuple[SetLog, ...]]] = MappingProxyType({
    ExerciseType.WEIGHT: _weighted,
    ExerciseType.BODYWEIGHT: _reps_only,
    ExerciseType.REPS_ONLY: _reps_only,
    ExerciseType.ASSISTED: _assisted,
    ExerciseType.CARDIO: _cardio,
    ExerciseType.DURATION: _timed,
})


def default_sets(exercise: ExerciseInfo, count: int) -> tuple[SetLog, ...]:
    """Return the type-appropriate starting sets for an exercise.

    Args:
        exercise: Catalog entry.
        count: Number of sets for rep-based exercises (cardio, timed and
            GPS-tracked exercises always get one set).

    Returns:
        Incomplete SetLogs ready to be shown as targets.
    """
    if exercise.supports_gps_tracking:
        return _cardio(count)
    factory = _DEFAULTS_BY_TYPE.get(exercise.exercise_type, _weighted)
    return factory(max(count, 1))
