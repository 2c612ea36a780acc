"""Tests for suggestion/shift JSON serialization."""

from __future__ import annotations

import json

from suggestion_engine.models.analysis import ClusterData
from suggestion_engine.models.enums import PatternType, SetArrangement, ShiftKind
from suggestion_engine.models.history import SetLog
from suggestion_engine.models.session_state import IntraSessionState, PatternShiftResult
from suggestion_engine.models.suggestion import SmartSuggestionResult
from suggestion_engine.serialization.suggestion_json import (
    _camel,
    _convert_set,
    to_shift_dict,
    to_suggestion_dict,
    to_suggestion_json,
)


def _make_result(**overrides) -> SmartSuggestionResult:
    defaults = {
        "sets": (SetLog(weight=125.0, reps=5), SetLog(weight=125.0, reps=5)),
        "history_set_count": 2,
        "pattern": PatternType.PROGRESSIVE_OVERLOAD,
        "confidence": 0.82,
        "set_pattern": SetArrangement.STRAIGHT_ACROSS,
    }
    defaults.update(overrides)
    return SmartSuggestionResult(**defaults)


class TestConvertSet:
    def test_only_present_fields(self) -> None:
        assert _convert_set(SetLog(weight=100.0, reps=5)) == {
            "completed": False,
            "weight": 100.0,
            "reps": 5,
        }

    def test_assisted_fields_camel_cased(self) -> None:
        out = _convert_set(SetLog(assistance_weight=30.0, reps=8))
        assert out["assistanceWeight"] == 30.0
        assert "weight" not in out

    def test_camel(self) -> None:
        assert _camel("assistance_weight") == "assistanceWeight"
        assert _camel("reps") == "reps"


class TestToSuggestionDict:
    def test_enum_names_lower_cased(self) -> None:
        out = to_suggestion_dict(_make_result())
        assert out["pattern"] == "progressive_overload"
        assert out["setPattern"] == "straight_across"

    def test_missing_optional_fields(self) -> None:
        out = to_suggestion_dict(_make_result(set_pattern=None))
        assert out["setPattern"] is None
        assert out["clusters"] is None
        assert out["dataPoints"] == []

    def test_data_points_rendered(self, point_factory) -> None:
        point = point_factory(7, [(100.0, 5), (110.0, 3)])
        out = to_suggestion_dict(_make_result(data_points=(point,)))
        rendered = out["dataPoints"][0]
        assert rendered["topSetWeight"] == 110.0
        assert rendered["setDetails"] == [{"weight": 100.0, "reps": 5}, {"weight": 110.0, "reps": 3}]
        assert rendered["date"].startswith("2024-05-25")

    def test_clusters_rendered(self, point_factory) -> None:
        heavy = point_factory(7, [(100.0, 5)])
        light = point_factory(3, [(80.0, 12)])
        clusters = ClusterData(heavy=(heavy,), light=(light,), next_is_heavy=True)
        out = to_suggestion_dict(_make_result(pattern=PatternType.REP_CYCLING, clusters=clusters))
        assert out["clusters"]["nextIsHeavy"] is True
        assert len(out["clusters"]["heavy"]) == 1


class TestToSuggestionJson:
    def test_valid_json_with_sorted_keys(self) -> None:
        text = to_suggestion_json(_make_result())
        parsed = json.loads(text)
        assert parsed["historySetCount"] == 2
        assert list(parsed) == sorted(parsed)

    def test_identical_results_identical_text(self) -> None:
        assert to_suggestion_json(_make_result()) == to_suggestion_json(_make_result())


class TestToShiftDict:
    def test_shift_rendered(self, barbell_compound) -> None:
        state = IntraSessionState(exercise=barbell_compound, pattern_shifts=1)
        result = PatternShiftResult(
            shifted=True,
            new_targets=(SetLog(weight=205.0, reps=5),),
            kind=ShiftKind.RECLASSIFIED,
            session_state=state,
        )
        out = to_shift_dict(result)
        assert out["kind"] == "reclassified"
        assert out["newTargets"][0]["weight"] == 205.0
        assert out["patternShifts"] == 1

    def test_no_shift(self) -> None:
        out = to_shift_dict(PatternShiftResult(shifted=False))
        assert out == {"shifted": False, "kind": "none", "newTargets": [], "patternShifts": 0}
