"""Shared test fixtures: reference clock, catalog entries, session/point builders."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable, Sequence

import pytest

from suggestion_engine.models.data_point import ExerciseDataPoint, SetPositionData
from suggestion_engine.models.enums import ExerciseType
from suggestion_engine.models.exercise import ExerciseInfo
from suggestion_engine.models.history import SetLog, WorkoutExercise, WorkoutSession

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)
BENCH = "Bench Press"


def make_point(
    days_ago: float,
    sets: Sequence[tuple[float, int]],
    all_sets_completed: bool = True,
) -> ExerciseDataPoint:
    """Data point built directly from (weight, reps) pairs, all completed."""
    weights = [float(w) for w, _ in sets]
    reps = [r for _, r in sets]
    top = max(weights)
    return ExerciseDataPoint(
        date=NOW - timedelta(days=days_ago),
        avg_weight=sum(weights) / len(weights),
        avg_reps=sum(reps) / len(reps),
        top_set_weight=top,
        top_set_reps=reps[weights.index(top)],
        total_sets=len(sets),
        total_volume=sum(w * r for w, r in zip(weights, reps)),
        set_details=tuple(SetPositionData(weight=w, reps=r) for w, r in zip(weights, reps)),
        all_sets_completed=all_sets_completed,
    )


def make_session(
    days_ago: float,
    sets: Sequence[tuple[float, int]],
    name: str = BENCH,
    session_id: str | None = None,
) -> WorkoutSession:
    """Session holding one exercise whose sets were all completed."""
    return WorkoutSession(
        id=session_id or f"s-{days_ago:g}",
        date=NOW - timedelta(days=days_ago),
        exercises=(
            WorkoutExercise(
                name=name,
                sets=tuple(SetLog(completed=True, weight=w, reps=r) for w, r in sets),
            ),
        ),
    )


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def barbell_compound() -> ExerciseInfo:
    """Bench press: compound, barbell (5 lb round-down)."""
    return ExerciseInfo(name=BENCH, is_compound=True, equipment=("Barbell",))


@pytest.fixture
def dumbbell_isolation() -> ExerciseInfo:
    """Dumbbell curl: isolation, 10% increase cap."""
    return ExerciseInfo(name="Dumbbell Curl", equipment=("Dumbbell",))


@pytest.fixture
def pull_up() -> ExerciseInfo:
    return ExerciseInfo(
        name="Pull Up",
        exercise_type=ExerciseType.BODYWEIGHT,
        is_compound=True,
        is_bodyweight=True,
    )


@pytest.fixture
def assisted_dip() -> ExerciseInfo:
    return ExerciseInfo(
        name="Assisted Dip",
        exercise_type=ExerciseType.ASSISTED,
        equipment=("Machine",),
    )


@pytest.fixture
def treadmill_run() -> ExerciseInfo:
    return ExerciseInfo(
        name="Treadmill Run",
        exercise_type=ExerciseType.CARDIO,
        equipment=("Cardio Machine",),
    )


@pytest.fixture
def progressing_sessions() -> list[WorkoutSession]:
    """Five weekly bench sessions climbing 100 → 120 lb, last one 2 days ago."""
    return [
        make_session(2 + 7 * (4 - i), [(100.0 + 5 * i, 5)] * 3)
        for i in range(5)
    ]


@pytest.fixture
def session_factory() -> Callable[..., WorkoutSession]:
    return make_session


@pytest.fixture
def point_factory() -> Callable[..., ExerciseDataPoint]:
    return make_point
