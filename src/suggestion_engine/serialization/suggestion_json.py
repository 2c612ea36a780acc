"""JSON serialization for suggestion and pattern-shift results.

Converts engine output into plain dicts that the host application can store
or send over the wire. Enum members are rendered as lower-case names and
datetimes as ISO-8601 strings.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from enum import Enum

from suggestion_engine.models.analysis import ClusterData
from suggestion_engine.models.data_point import ExerciseDataPoint
from suggestion_engine.models.history import SetLog
from suggestion_engine.models.session_state import PatternShiftResult
from suggestion_engine.models.suggestion import SmartSuggestionResult

# SetLog fields rendered for a target, in output order.
_SET_FIELDS = ("weight", "reps", "assistance_weight", "duration", "distance")


def to_suggestion_dict(result: SmartSuggestionResult) -> dict:
    """Convert a SmartSuggestionResult to a JSON-compatible dict."""
    return {
        "sets": [_convert_set(s) for s in result.sets],
        "historySetCount": result.history_set_count,
        "pattern": _enum_key(result.pattern),
        "confidence": result.confidence,
        "setPattern": _enum_key(result.set_pattern),
        "clusters": _convert_clusters(result.clusters),
        "dataPoints": [_convert_point(p) for p in result.data_points],
    }


def to_suggestion_json(result: SmartSuggestionResult, indent: int | None = 2) -> str:
    """Convert a SmartSuggestionResult to a JSON string with sorted keys."""
    return json.dumps(to_suggestion_dict(result), indent=indent, sort_keys=True)


def to_shift_dict(result: PatternShiftResult) -> dict:
    """Convert a PatternShiftResult to a JSON-compatible dict.

    The caller-owned session state is reduced to its shift counter.
    """
    state = result.session_state
    return {
        "shifted": result.shifted,
        "kind": _enum_key(result.kind),
        "newTargets": [_convert_set(s) for s in result.new_targets],
        "patternShifts": state.pattern_shifts if state is not None else 0,
    }


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _enum_key(member: Enum | None) -> str | None:
    return member.name.lower() if member is not None else None


def _convert_set(target: SetLog) -> dict:
    """Only the fields the target actually carries are emitted."""
    out: dict = {"completed": target.completed}
    for name in _SET_FIELDS:
        value = getattr(target, name)
        if value is not None:
            out[_camel(name)] = value
    return out


def _convert_point(point: ExerciseDataPoint) -> dict:
    return {
        "date": point.date.isoformat(),
        "avgWeight": point.avg_weight,
        "avgReps": point.avg_reps,
        "topSetWeight": point.top_set_weight,
        "topSetReps": point.top_set_reps,
        "totalSets": point.total_sets,
        "totalVolume": point.total_volume,
        "allSetsCompleted": point.all_sets_completed,
        "setDetails": [{"weight": d.weight, "reps": d.reps} for d in point.set_details],
    }


def _convert_clusters(clusters: ClusterData | None) -> dict | None:
    if clusters is None:
        return None
    return {
        "heavy": [_convert_point(p) for p in clusters.heavy],
        "light": [_convert_point(p) for p in clusters.light],
        "nextIsHeavy": clusters.next_is_heavy,
    }


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)
