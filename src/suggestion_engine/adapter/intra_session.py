"""Intra-session adapter — re-targets the remaining sets from live results.

Called once per newly completed set. Two mechanisms, checked in order:

1. Full reclassification. When the session as a whole has drifted far from
   the prediction (mean deviation over 15% in weight or 30% in reps, after at
   least two sets) and no historical session resembles the live one, the
   live sets are treated as a new data point. The classifier and generator
   then run again and produce new targets for the remaining sets. This can
   happen at most MAX_PATTERN_SHIFTS_PER_SESSION times per session. The
   counter lives in the caller-owned IntraSessionState.
2. Simple bump. Two or more reps over target raise every remaining weight
   by 2.5%; two or more under lower them by 5%. Both are re-rounded.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Sequence

from suggestion_engine.classifier.classifier import PatternClassifier, default_classifier
from suggestion_engine.clock import resolve_now
from suggestion_engine.exceptions import SuggestionEngineError
from suggestion_engine.generator.builder import SuggestionBuilder, increment_policy
from suggestion_engine.history.extractor import set_load, summarize_sets
from suggestion_engine.math.rounding import round_to_increment
from suggestion_engine.models.data_point import ExerciseDataPoint
from suggestion_engine.models.enums import (
    EASY_BUMP_PERCENT,
    EASY_REPS_ABOVE,
    MAX_PATTERN_SHIFTS_PER_SESSION,
    MAX_SESSIONS,
    MISS_REDUCE_PERCENT,
    MISS_REPS_BELOW,
    PATTERN_SHIFT_MAX_SIMILARITY,
    PATTERN_SHIFT_MIN_COMPLETED_SETS,
    PATTERN_SHIFT_REPS_THRESHOLD,
    PATTERN_SHIFT_WEIGHT_THRESHOLD,
    SIMILARITY_REPS_FACTOR,
    SIMILARITY_WEIGHT_FACTOR,
    ShiftKind,
)
from suggestion_engine.models.history import SetLog
from suggestion_engine.models.session_state import IntraSessionState, PatternShiftResult

logger = logging.getLogger(__name__)


def _relative_gap(actual: float, reference: float) -> float:
    """|actual − reference| / reference; a zero reference matches only zero."""
    if reference > 0:
        return abs(actual - reference) / reference
    return 0.0 if actual == 0 else 1.0


def cumulative_deviation(state: IntraSessionState) -> tuple[float, float]:
    """Mean relative (weight, reps) deviation of the live sets from prediction.

    Positions whose prediction carries no weight (or no reps) are left out of
    that dimension's mean.
    """
    weight_gaps: list[float] = []
    reps_gaps: list[float] = []
    for actual, predicted in state.completed:
        if set_load(predicted) > 0:
            weight_gaps.append(_relative_gap(set_load(actual), set_load(predicted)))
        if predicted.reps is not None and predicted.reps > 0:
            reps_gaps.append(_relative_gap(float(actual.reps or 0), float(predicted.reps)))

    weight_dev = sum(weight_gaps) / len(weight_gaps) if weight_gaps else 0.0
    reps_dev = sum(reps_gaps) / len(reps_gaps) if reps_gaps else 0.0
    return weight_dev, reps_dev


def session_similarity(live: Sequence[SetLog], session: ExerciseDataPoint) -> float:
    """Dissimilarity between the live sets and one historical session.

    0.6 × weight gap + 0.4 × reps gap per set position, averaged. Positions
    past the end of the historical ladder compare against its last set.
    Lower is more similar.
    """
    details = session.set_details
    if not details or not live:
        return float("inf")

    scores: list[float] = []
    for position, actual in enumerate(live):
        reference = details[min(position, len(details) - 1)]
        weight_gap = _relative_gap(set_load(actual), reference.weight)
        reps_gap = _relative_gap(float(actual.reps or 0), float(reference.reps))
        scores.append(SIMILARITY_WEIGHT_FACTOR * weight_gap + SIMILARITY_REPS_FACTOR * reps_gap)
    return sum(scores) / len(scores)


def best_history_match(state: IntraSessionState) -> float:
    """Lowest dissimilarity between the live session and any past session."""
    live = [actual for actual, _ in state.completed]
    return min(
        (session_similarity(live, session) for session in state.history),
        default=float("inf"),
    )


def scale_targets(
    targets: Sequence[SetLog],
    factor: float,
    state: IntraSessionState,
) -> tuple[SetLog, ...]:
    """Multiply each target's weight by ``factor`` and re-round it.

    Targets without a ``weight`` (reps-only, assisted, timed) pass through.
    """
    policy = increment_policy(state.exercise)
    scaled: list[SetLog] = []
    for target in targets:
        if target.weight is None:
            scaled.append(dataclasses.replace(target, completed=False))
            continue
        scaled.append(
            dataclasses.replace(
                target,
                weight=round_to_increment(target.weight * factor, policy),
                completed=False,
            )
        )
    return tuple(scaled)


class IntraSessionAdapter:
    """Adapts remaining set targets during an active session.

    Usage::

        adapter = IntraSessionAdapter()
        result = adapter.adapt(done, predicted, remaining, state)
        state = result.session_state
    """

    def __init__(
        self,
        classifier: PatternClassifier | None = None,
        builder: SuggestionBuilder | None = None,
    ) -> None:
        self.classifier = classifier or default_classifier()
        self.builder = builder or SuggestionBuilder()

    def adapt(
        self,
        completed_set: SetLog,
        predicted_target: SetLog,
        remaining_targets: Sequence[SetLog],
        session_state: IntraSessionState,
        now: datetime | None = None,
    ) -> PatternShiftResult:
        """Recompute the remaining targets after one set is completed.

        Args:
            completed_set: What the lifter actually did.
            predicted_target: The target that had been shown for that set.
            remaining_targets: Targets of every not-yet-completed set, in order.
            session_state: State returned by the previous call (or by
                SuggestionEngine.start_session for the first set).
            now: Timestamp for the live session when it is reclassified.

        Returns:
            PatternShiftResult carrying the next session_state.
        """
        state = dataclasses.replace(
            session_state,
            completed=session_state.completed + ((completed_set, predicted_target),),
        )
        remaining = tuple(remaining_targets)
        if not remaining:
            return PatternShiftResult(shifted=False, session_state=state)

        if self._should_reclassify(state):
            new_targets = self._reclassify(state, len(remaining), now)
            state = dataclasses.replace(state, pattern_shifts=state.pattern_shifts + 1)
            logger.info(
                "Pattern shift for %s after set %d; remaining targets recomputed",
                state.exercise.name,
                state.completed_count,
            )
            return PatternShiftResult(
                shifted=True,
                new_targets=new_targets,
                kind=ShiftKind.RECLASSIFIED,
                session_state=state,
            )

        if completed_set.reps is None or predicted_target.reps is None:
            return PatternShiftResult(shifted=False, session_state=state)

        if completed_set.reps >= predicted_target.reps + EASY_REPS_ABOVE:
            logger.debug("Easy set for %s; bumping remaining targets", state.exercise.name)
            return PatternShiftResult(
                shifted=True,
                new_targets=scale_targets(remaining, 1.0 + EASY_BUMP_PERCENT, state),
                kind=ShiftKind.EASY_BUMP,
                session_state=state,
            )

        if completed_set.reps <= predicted_target.reps - MISS_REPS_BELOW:
            logger.debug("Missed set for %s; reducing remaining targets", state.exercise.name)
            return PatternShiftResult(
                shifted=True,
                new_targets=scale_targets(remaining, 1.0 - MISS_REDUCE_PERCENT, state),
                kind=ShiftKind.MISS_REDUCE,
                session_state=state,
            )

        return PatternShiftResult(shifted=False, session_state=state)

    @staticmethod
    def _should_reclassify(state: IntraSessionState) -> bool:
        if state.pattern_shifts >= MAX_PATTERN_SHIFTS_PER_SESSION:
            return False
        if not state.exercise.supports_progression:
            return False
        if state.completed_count < PATTERN_SHIFT_MIN_COMPLETED_SETS:
            return False

        weight_dev, reps_dev = cumulative_deviation(state)
        if weight_dev <= PATTERN_SHIFT_WEIGHT_THRESHOLD and reps_dev <= PATTERN_SHIFT_REPS_THRESHOLD:
            return False

        return best_history_match(state) > PATTERN_SHIFT_MAX_SIMILARITY

    def _reclassify(
        self,
        state: IntraSessionState,
        remaining_count: int,
        now: datetime | None,
    ) -> tuple[SetLog, ...]:
        """Re-run classification and generation with the live session as evidence."""
        reference = resolve_now(now)
        live_sets = [dataclasses.replace(actual, completed=True) for actual, _ in state.completed]
        live_point = summarize_sets(reference, live_sets)
        if live_point is None:
            raise SuggestionEngineError("Cannot reclassify a session with no completed sets")

        points = (state.history + (live_point,))[-MAX_SESSIONS:]
        analysis, _ = self.classifier.classify(points, state.exercise, now=reference)
        result = self.builder.build(
            analysis,
            state.exercise,
            live_point.set_details,
            requested_sets=state.completed_count + remaining_count,
        )
        return tuple(result.sets[state.completed_count:])


def adapt_intra_session(
    completed_set: SetLog,
    predicted_target: SetLog,
    remaining_targets: Sequence[SetLog],
    session_state: IntraSessionState,
    now: datetime | None = None,
) -> PatternShiftResult:
    """Functional shorthand for ``IntraSessionAdapter().adapt(...)``."""
    return IntraSessionAdapter().adapt(
        completed_set, predicted_target, remaining_targets, session_state, now=now
    )
