"""SuggestionEngine — the orchestrator behind the public suggestion API."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Sequence

from suggestion_engine.adapter.intra_session import IntraSessionAdapter
from suggestion_engine.classifier.classifier import PatternClassifier, default_classifier
from suggestion_engine.clock import resolve_now
from suggestion_engine.generator.builder import SuggestionBuilder
from suggestion_engine.history.extractor import (
    extract_data_points,
    last_completed_sets,
    set_load,
)
from suggestion_engine.models.classification_trace import ClassificationTrace
from suggestion_engine.models.data_point import SetPositionData
from suggestion_engine.models.exercise import ExerciseInfo
from suggestion_engine.models.history import SetLog, WorkoutSession
from suggestion_engine.models.session_state import IntraSessionState, PatternShiftResult
from suggestion_engine.models.suggestion import SmartSuggestionResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SuggestionOptions:
    """Per-call knobs for generate_suggestion.

    ``exercise`` is the catalog entry; None means the catalog had no match.
    ``exclude_session_id`` names the in-progress session so it never counts
    as history. ``now`` pins the reference instant for reproducible output.
    """

    exercise: ExerciseInfo | None = None
    requested_sets: int | None = None
    exclude_session_id: str | None = None
    now: datetime | None = None

    def __post_init__(self) -> None:
        if self.requested_sets is not None and self.requested_sets < 1:
            raise ValueError(f"requested_sets must be >= 1, got {self.requested_sets}")


def _completed_positions(sets: Sequence[SetLog]) -> tuple[SetPositionData, ...]:
    """Completed sets of a logged session as (weight, reps) positions."""
    return tuple(
        SetPositionData(weight=float(set_load(s)), reps=int(s.reps or 0))
        for s in sets
        if s.completed
    )


class SuggestionEngine:
    """Runs extraction, classification and generation for one exercise.

    Usage:
        engine = SuggestionEngine()
        result = engine.generate_suggestion("Bench Press", sessions, options)
        state = engine.start_session(result, exercise)
        shift = engine.adapt_intra_session(done, result.sets[0], result.sets[1:], state)
    """

    def __init__(
        self,
        classifier: PatternClassifier | None = None,
        builder: SuggestionBuilder | None = None,
    ) -> None:
        self.classifier = classifier or default_classifier()
        self.builder = builder or SuggestionBuilder()
        self.adapter = IntraSessionAdapter(self.classifier, self.builder)

    def suggest(
        self,
        exercise_name: str,
        history: Iterable[WorkoutSession],
        options: SuggestionOptions | None = None,
    ) -> tuple[SmartSuggestionResult, ClassificationTrace]:
        """Produce next-session targets together with the classification trace.

        Args:
            exercise_name: Exercise to suggest for.
            history: The user's past sessions, in any order.
            options: Catalog entry, set count, in-progress session, clock.

        Returns:
            A tuple of (SmartSuggestionResult, ClassificationTrace).
        """
        options = options or SuggestionOptions()
        exercise = options.exercise or ExerciseInfo.unknown(exercise_name)
        now = resolve_now(options.now)
        sessions = list(history)

        points = extract_data_points(
            exercise_name,
            sessions,
            exercise=exercise,
            exclude_session_id=options.exclude_session_id,
            now=now,
        )
        analysis, trace = self.classifier.classify(points, exercise, now=now)

        if points:
            base = points[-1].set_details
        else:
            # Nothing inside the lookback window; carry the newest logged sets forward
            last_sets = last_completed_sets(
                exercise_name, sessions, exclude_session_id=options.exclude_session_id
            )
            base = _completed_positions(last_sets) if last_sets else ()

        result = self.builder.build(analysis, exercise, base, options.requested_sets)
        logger.info(
            "Suggestion for %s: %s (confidence %.2f, %d sets)",
            exercise_name,
            result.pattern.name,
            result.confidence,
            len(result.sets),
        )
        return result, trace

    def generate_suggestion(
        self,
        exercise_name: str,
        history: Iterable[WorkoutSession],
        options: SuggestionOptions | None = None,
    ) -> SmartSuggestionResult:
        """Produce next-session targets for one exercise."""
        result, _ = self.suggest(exercise_name, history, options)
        return result

    @staticmethod
    def start_session(result: SmartSuggestionResult, exercise: ExerciseInfo) -> IntraSessionState:
        """Initial intra-session state for a suggestion the user is about to perform."""
        return IntraSessionState(
            exercise=exercise,
            pattern=result.pattern,
            history=result.data_points,
        )

    def adapt_intra_session(
        self,
        completed_set: SetLog,
        predicted_target: SetLog,
        remaining_targets: Sequence[SetLog],
        session_state: IntraSessionState,
        now: datetime | None = None,
    ) -> PatternShiftResult:
        """Recompute remaining targets after a set is completed."""
        return self.adapter.adapt(
            completed_set, predicted_target, remaining_targets, session_state, now=now
        )
