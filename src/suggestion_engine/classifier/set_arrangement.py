"""Set-ladder shape detection from a single session's per-set weights."""

from __future__ import annotations

from suggestion_engine.models.data_point import ExerciseDataPoint
from suggestion_engine.models.enums import (
    PYRAMID_DOWN_THRESHOLD,
    PYRAMID_UP_THRESHOLD,
    STRAIGHT_ACROSS_THRESHOLD,
    SetArrangement,
)


def detect_set_arrangement(point: ExerciseDataPoint) -> SetArrangement | None:
    """Classify the set ladder of one session.

    Compares the first and last set: last ≥ first × (1 + 10%) is a pyramid up,
    first ≥ last × (1 + 10%) a pyramid down. Otherwise, if every set is within
    5% of the session mean the sets are straight across. Any other shape
    (e.g. a peak in the middle) is left unclassified.

    Args:
        point: The session to inspect (normally the most recent one).

    Returns:
        The arrangement, or None if the ladder has no recognisable shape.
    """
    details = point.set_details
    if not details:
        return None

    weights = [d.weight for d in details]
    first = weights[0]
    last = weights[-1]

    if last > first and last >= first * (1.0 + PYRAMID_UP_THRESHOLD):
        return SetArrangement.PYRAMID_UP
    if first > last and first >= last * (1.0 + PYRAMID_DOWN_THRESHOLD):
        return SetArrangement.PYRAMID_DOWN

    mean = sum(weights) / len(weights)
    tolerance = mean * STRAIGHT_ACROSS_THRESHOLD
    if all(abs(w - mean) <= tolerance for w in weights):
        return SetArrangement.STRAIGHT_ACROSS
    return None
