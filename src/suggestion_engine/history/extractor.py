"""History extractor — session history → bounded per-exercise data-point series.

All functions are pure: they read the caller's already-hydrated sessions and
return new values.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterable, Sequence

from suggestion_engine import config
from suggestion_engine.clock import as_utc, resolve_now
from suggestion_engine.exceptions import MalformedHistoryError
from suggestion_engine.models.data_point import ExerciseDataPoint, SetPositionData
from suggestion_engine.models.enums import MAX_SESSIONS
from suggestion_engine.models.exercise import ExerciseInfo
from suggestion_engine.models.history import SetLog, WorkoutSession

logger = logging.getLogger(__name__)


def set_load(set_log: SetLog) -> float:
    """Load of a logged set: its weight, else its assistance, else zero."""
    if set_log.weight is not None:
        return set_log.weight
    return set_log.assistance_weight or 0.0


def summarize_sets(date: datetime, sets: Sequence[SetLog]) -> ExerciseDataPoint | None:
    """Summarise one session's sets for an exercise.

    Only completed sets contribute. Missing weight or reps count as zero;
    assisted sets (no weight, only assistance) report their assistance load.

    Args:
        date: Session timestamp.
        sets: All logged sets of the exercise, in order performed.

    Returns:
        An ExerciseDataPoint, or None when no set was completed.
    """
    completed = [s for s in sets if s.completed]
    if not completed:
        return None

    weights = [float(set_load(s)) for s in completed]
    reps = [int(s.reps or 0) for s in completed]

    top_weight = max(weights)
    top_index = weights.index(top_weight)

    return ExerciseDataPoint(
        date=as_utc(date),
        avg_weight=sum(weights) / len(weights),
        avg_reps=sum(reps) / len(reps),
        top_set_weight=top_weight,
        top_set_reps=reps[top_index],
        total_sets=len(completed),
        total_volume=sum(w * r for w, r in zip(weights, reps)),
        set_details=tuple(SetPositionData(weight=w, reps=r) for w, r in zip(weights, reps)),
        all_sets_completed=len(completed) == len(sets),
    )


def extract_data_points(
    exercise_name: str,
    sessions: Iterable[WorkoutSession],
    *,
    exercise: ExerciseInfo | None = None,
    exclude_session_id: str | None = None,
    now: datetime | None = None,
    lookback: timedelta | None = None,
    max_sessions: int = MAX_SESSIONS,
) -> list[ExerciseDataPoint]:
    """Build the chronological data-point series for one exercise.

    Args:
        exercise_name: Exercise to extract, matched by exact name.
        sessions: The user's session history, in any order.
        exercise: Catalog entry; GPS-tracked, cardio and duration exercises
            never produce data points.
        exclude_session_id: In-progress session to leave out.
        now: Reference instant for the lookback window (defaults to now).
        lookback: Window size (defaults to the configured 8 weeks).
        max_sessions: Keep at most this many of the newest points.

    Returns:
        Data points sorted oldest first, possibly empty.
    """
    if exercise is not None and not exercise.supports_progression:
        logger.debug("Skipping %s: no weight/rep progression for this type", exercise_name)
        return []

    reference = resolve_now(now)
    cutoff = reference - (lookback if lookback is not None else config.HISTORY_LOOKBACK)

    points: list[ExerciseDataPoint] = []
    for session in sessions:
        if exclude_session_id is not None and session.id == exclude_session_id:
            continue
        if as_utc(session.date) < cutoff:
            continue

        entry = session.find_exercise(exercise_name)
        if entry is None:
            continue

        point = summarize_sets(session.date, entry.sets)
        if point is not None:
            points.append(point)

    # Stable sort keeps input order for sessions sharing a timestamp
    points.sort(key=lambda p: p.date)

    if len(points) > max_sessions:
        points = points[-max_sessions:]

    logger.debug("Extracted %d data points for %s", len(points), exercise_name)
    return points


def last_completed_sets(
    exercise_name: str,
    sessions: Iterable[WorkoutSession],
    exclude_session_id: str | None = None,
) -> tuple[SetLog, ...] | None:
    """Return every logged set from the most recent session of an exercise.

    Only sessions with at least one completed set of the exercise qualify.
    Both completed and incomplete sets are returned, in order.
    """
    ordered = sorted(sessions, key=lambda s: as_utc(s.date), reverse=True)
    for session in ordered:
        if exclude_session_id is not None and session.id == exclude_session_id:
            continue
        entry = session.find_exercise(exercise_name)
        if entry is not None and any(s.completed for s in entry.sets):
            return entry.sets
    return None


def _contract_violation(point: ExerciseDataPoint) -> str | None:
    if point.total_sets <= 0:
        return f"total_sets={point.total_sets}"
    if point.total_volume < 0:
        return f"negative volume {point.total_volume}"
    if not point.set_details:
        return "no set details"
    return None


def validate_data_points(points: Sequence[ExerciseDataPoint]) -> None:
    """Check the classifier's input contract.

    Raises:
        MalformedHistoryError: If a point has no completed sets, negative
            volume, or an empty set ladder.
    """
    for index, point in enumerate(points):
        problem = _contract_violation(point)
        if problem is not None:
            raise MalformedHistoryError(f"Data point {index} has {problem}", index=index)


def drop_malformed(points: Sequence[ExerciseDataPoint]) -> list[ExerciseDataPoint]:
    """Filter out points that violate the input contract, logging each one."""
    kept: list[ExerciseDataPoint] = []
    for index, point in enumerate(points):
        problem = _contract_violation(point)
        if problem is not None:
            logger.warning("Ignoring data point %d: %s", index, problem)
            continue
        kept.append(point)
    return kept
