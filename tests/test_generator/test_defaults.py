"""Tests for the static default-set table."""

from __future__ import annotations

import pytest

from suggestion_engine.generator.defaults import default_sets
from suggestion_engine.models.enums import ExerciseType
from suggestion_engine.models.exercise import ExerciseInfo


class TestDefaultSets:
    def test_weighted(self, barbell_compound) -> None:
        sets = default_sets(barbell_compound, 3)
        assert [(s.weight, s.reps) for s in sets] == [(0.0, 8)] * 3

    def test_bodyweight_has_reps_only(self, pull_up) -> None:
        sets = default_sets(pull_up, 4)
        assert len(sets) == 4
        assert all(s.weight is None and s.reps == 10 for s in sets)

    def test_reps_only(self) -> None:
        sets = default_sets(ExerciseInfo("Plank Jacks", ExerciseType.REPS_ONLY), 2)
        assert all(s.reps == 10 for s in sets)

    def test_assisted(self, assisted_dip) -> None:
        sets = default_sets(assisted_dip, 3)
        assert all(s.assistance_weight == 0.0 and s.reps == 8 for s in sets)

    def test_cardio_single_set(self, treadmill_run) -> None:
        sets = default_sets(treadmill_run, 5)
        assert len(sets) == 1
        assert sets[0].duration == 0.0
        assert sets[0].distance == 0.0

    def test_duration_single_set(self) -> None:
        sets = default_sets(ExerciseInfo("Plank", ExerciseType.DURATION), 3)
        assert len(sets) == 1
        assert sets[0].duration == 0.0
        assert sets[0].distance is None

    def test_gps_tracked_uses_cardio_default(self) -> None:
        outdoor = ExerciseInfo("Outdoor Run", ExerciseType.WEIGHT, supports_gps_tracking=True)
        sets = default_sets(outdoor, 3)
        assert len(sets) == 1
        assert sets[0].distance == 0.0

    @pytest.mark.parametrize("count", [0, -2])
    def test_at_least_one_set(self, barbell_compound, count: int) -> None:
        assert len(default_sets(barbell_compound, count)) == 1

    def test_targets_are_incomplete(self, barbell_compound) -> None:
        assert not any(s.completed for s in default_sets(barbell_compound, 3))
