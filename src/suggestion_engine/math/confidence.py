"""Confidence score for a classified pattern.

confidence = FIT_WEIGHT × fit + COVERAGE_WEIGHT × coverage + RECENCY_WEIGHT × recency

    fit      = R² of the trend regression, or a per-pattern prior when the
               pattern was not decided by a regression
    coverage = data points found / MAX_SESSIONS, capped at 1
    recency  = 1 − days since the last session / STALE_GAP_DAYS, floored at 0

Each term lies in [0, 1] and the weights sum to 1, so the score does too; it
is non-decreasing in fit, coverage and recency.
"""

from __future__ import annotations

from suggestion_engine.models.enums import (
    CONFIDENCE_COVERAGE_WEIGHT,
    CONFIDENCE_FIT_WEIGHT,
    CONFIDENCE_RECENCY_WEIGHT,
    MAX_SESSIONS,
    STALE_GAP_DAYS,
)


def _unit(value: float) -> float:
    return max(0.0, min(1.0, value))


def coverage_score(n_points: int) -> float:
    """Fraction of the MAX_SESSIONS window that is filled with data."""
    return _unit(n_points / MAX_SESSIONS)


def recency_score(days_since_last: float) -> float:
    """1.0 for a session today, falling linearly to 0.0 at the stale gap."""
    return _unit(1.0 - days_since_last / STALE_GAP_DAYS)


def compute_confidence(fit: float, n_points: int, days_since_last: float) -> float:
    """Blend fit quality, data coverage and recency into a [0, 1] score.

    Args:
        fit: R² (or pattern prior) in [0, 1].
        n_points: Number of data points analysed.
        days_since_last: Days between the most recent session and now.

    Returns:
        Confidence in [0, 1], rounded to 4 decimals.
    """
    score = (
        CONFIDENCE_FIT_WEIGHT * _unit(fit)
        + CONFIDENCE_COVERAGE_WEIGHT * coverage_score(n_points)
        + CONFIDENCE_RECENCY_WEIGHT * recency_score(days_since_last)
    )
    return round(_unit(score), 4)
