"""Custom exception hierarchy for the suggestion engine."""

from __future__ import annotations


class SuggestionEngineError(Exception):
    """Base exception for all suggestion_engine errors."""


class MalformedHistoryError(SuggestionEngineError):
    """A data point violates the input contract (e.g. ``total_sets == 0``)."""

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
