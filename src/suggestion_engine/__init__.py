"""Smart set-suggestion engine.

Suggests per-set weight and rep targets for a strength exercise from the
user's recent history, and re-targets the remaining sets while a session is
in progress.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Iterable, Sequence

from suggestion_engine.engine import SuggestionEngine, SuggestionOptions
from suggestion_engine.exceptions import MalformedHistoryError, SuggestionEngineError
from suggestion_engine.models.history import SetLog, WorkoutSession
from suggestion_engine.models.session_state import IntraSessionState, PatternShiftResult
from suggestion_engine.models.suggestion import SmartSuggestionResult

__all__ = [
    "MalformedHistoryError",
    "SuggestionEngine",
    "SuggestionEngineError",
    "SuggestionOptions",
    "adapt_intra_session",
    "generate_suggestion",
]


@lru_cache(maxsize=1)
def _default_engine() -> SuggestionEngine:
    return SuggestionEngine()


def generate_suggestion(
    exercise_name: str,
    history: Iterable[WorkoutSession],
    options: SuggestionOptions | None = None,
) -> SmartSuggestionResult:
    """Suggest next-session targets with the default engine."""
    return _default_engine().generate_suggestion(exercise_name, history, options)


def adapt_intra_session(
    completed_set: SetLog,
    predicted_target: SetLog,
    remaining_targets: Sequence[SetLog],
    session_state: IntraSessionState,
    now: datetime | None = None,
) -> PatternShiftResult:
    """Re-target the remaining sets with the default engine."""
    return _default_engine().adapt_intra_session(
        completed_set, predicted_target, remaining_targets, session_state, now=now
    )
