"""Tests for the intra-session adapter: easy/miss bumps and pattern shifts."""

from __future__ import annotations

import pytest

from suggestion_engine.adapter.intra_session import (
    IntraSessionAdapter,
    adapt_intra_session,
    best_history_match,
    cumulative_deviation,
    session_similarity,
)
from suggestion_engine.exceptions import SuggestionEngineError
from suggestion_engine.models.enums import ShiftKind
from suggestion_engine.models.history import SetLog
from suggestion_engine.models.session_state import IntraSessionState


def _targets(weight: float, reps: int, count: int) -> tuple[SetLog, ...]:
    return tuple(SetLog(weight=weight, reps=reps) for _ in range(count))


def _done(weight: float, reps: int) -> SetLog:
    return SetLog(completed=True, weight=weight, reps=reps)


class TestSimpleBump:
    def setup_method(self) -> None:
        self.adapter = IntraSessionAdapter()

    def test_easy_set_bumps_remaining_by_two_and_a_half_percent(self, barbell_compound) -> None:
        state = IntraSessionState(exercise=barbell_compound)
        targets = _targets(200.0, 5, 4)
        result = self.adapter.adapt(_done(200.0, 7), targets[0], targets[1:], state)
        assert result.shifted
        assert result.kind == ShiftKind.EASY_BUMP
        assert [t.weight for t in result.new_targets] == [205.0] * 3
        assert all(t.reps == 5 and not t.completed for t in result.new_targets)

    def test_easy_bump_is_rounded_per_equipment(self, barbell_compound) -> None:
        state = IntraSessionState(exercise=barbell_compound)
        targets = _targets(125.0, 5, 3)
        result = self.adapter.adapt(_done(125.0, 8), targets[0], targets[1:], state)
        # 128.125 rounds down to the 5 lb plate step
        assert [t.weight for t in result.new_targets] == [125.0, 125.0]

    def test_missed_set_reduces_by_five_percent(self, barbell_compound) -> None:
        state = IntraSessionState(exercise=barbell_compound)
        targets = _targets(200.0, 8, 3)
        result = self.adapter.adapt(_done(200.0, 6), targets[0], targets[1:], state)
        assert result.kind == ShiftKind.MISS_REDUCE
        assert [t.weight for t in result.new_targets] == [190.0, 190.0]

    def test_on_target_does_not_shift(self, barbell_compound) -> None:
        state = IntraSessionState(exercise=barbell_compound)
        targets = _targets(200.0, 8, 3)
        result = self.adapter.adapt(_done(200.0, 9), targets[0], targets[1:], state)
        assert not result.shifted
        assert result.new_targets == ()
        assert result.kind == ShiftKind.NONE

    def test_last_set_never_shifts(self, barbell_compound) -> None:
        state = IntraSessionState(exercise=barbell_compound)
        result = self.adapter.adapt(_done(200.0, 12), SetLog(weight=200.0, reps=5), (), state)
        assert not result.shifted

    def test_state_records_completed_sets(self, barbell_compound) -> None:
        state = IntraSessionState(exercise=barbell_compound)
        targets = _targets(200.0, 5, 3)
        result = self.adapter.adapt(_done(200.0, 5), targets[0], targets[1:], state)
        assert result.session_state.completed_count == 1
        # The caller's state is never mutated
        assert state.completed_count == 0

    def test_targets_without_weight_pass_through(self, pull_up) -> None:
        state = IntraSessionState(exercise=pull_up)
        targets = tuple(SetLog(reps=10) for _ in range(3))
        result = self.adapter.adapt(SetLog(completed=True, reps=13), targets[0], targets[1:], state)
        assert result.kind == ShiftKind.EASY_BUMP
        assert all(t.weight is None and t.reps == 10 for t in result.new_targets)

    def test_functional_shorthand(self, barbell_compound) -> None:
        state = IntraSessionState(exercise=barbell_compound)
        targets = _targets(200.0, 5, 2)
        result = adapt_intra_session(_done(200.0, 7), targets[0], targets[1:], state)
        assert result.kind == ShiftKind.EASY_BUMP


class TestPatternShift:
    def setup_method(self) -> None:
        self.adapter = IntraSessionAdapter()

    def _history(self, point_factory):
        return tuple(point_factory(2 + 7 * (3 - i), [(100.0, 5)] * 4) for i in range(4))

    def test_large_deviation_reclassifies_once(self, point_factory, barbell_compound, now) -> None:
        state = IntraSessionState(exercise=barbell_compound, history=self._history(point_factory))
        targets = _targets(100.0, 5, 4)

        first = self.adapter.adapt(_done(60.0, 15), targets[0], targets[1:], state, now=now)
        # Set 1 only ever gets the simple bump
        assert first.kind == ShiftKind.EASY_BUMP

        second = self.adapter.adapt(
            _done(60.0, 15), targets[1], first.new_targets[1:], first.session_state, now=now
        )
        assert second.kind == ShiftKind.RECLASSIFIED
        assert second.shifted
        assert len(second.new_targets) == 2
        assert second.session_state.pattern_shifts == 1

        third = self.adapter.adapt(
            _done(60.0, 15),
            second.new_targets[0],
            second.new_targets[1:],
            second.session_state,
            now=now,
        )
        assert third.kind != ShiftKind.RECLASSIFIED
        assert third.session_state.pattern_shifts == 1

    def test_exhausted_guard_only_allows_simple_bump(self, point_factory, barbell_compound, now) -> None:
        done = ((_done(60.0, 15), SetLog(weight=100.0, reps=5)),)
        state = IntraSessionState(
            exercise=barbell_compound,
            history=self._history(point_factory),
            completed=done,
            pattern_shifts=1,
        )
        targets = _targets(100.0, 5, 3)
        result = self.adapter.adapt(_done(60.0, 15), targets[0], targets[1:], state, now=now)
        assert result.kind == ShiftKind.EASY_BUMP
        assert result.session_state.pattern_shifts == 1

    def test_matching_history_prevents_reclassification(
        self, point_factory, barbell_compound, now
    ) -> None:
        # The live session looks like a past 60 x 15 session
        history = self._history(point_factory) + (point_factory(1, [(60.0, 15)] * 4),)
        state = IntraSessionState(exercise=barbell_compound, history=history)
        targets = _targets(100.0, 5, 4)
        first = self.adapter.adapt(_done(60.0, 15), targets[0], targets[1:], state, now=now)
        second = self.adapter.adapt(
            _done(60.0, 15), targets[1], targets[2:], first.session_state, now=now
        )
        assert second.kind == ShiftKind.EASY_BUMP

    def test_small_deviation_never_reclassifies(self, point_factory, barbell_compound, now) -> None:
        state = IntraSessionState(exercise=barbell_compound, history=())
        targets = _targets(100.0, 5, 4)
        first = self.adapter.adapt(_done(100.0, 5), targets[0], targets[1:], state, now=now)
        second = self.adapter.adapt(
            _done(100.0, 5), targets[1], targets[2:], first.session_state, now=now
        )
        assert not second.shifted

    def test_reclassify_without_completed_sets_raises(self, barbell_compound, now) -> None:
        state = IntraSessionState(exercise=barbell_compound)
        with pytest.raises(SuggestionEngineError, match="no completed sets"):
            self.adapter._reclassify(state, remaining_count=2, now=now)


class TestDeviationHelpers:
    def test_cumulative_deviation(self, barbell_compound) -> None:
        state = IntraSessionState(
            exercise=barbell_compound,
            completed=(
                (_done(80.0, 5), SetLog(weight=100.0, reps=5)),
                (_done(100.0, 10), SetLog(weight=100.0, reps=5)),
            ),
        )
        weight_dev, reps_dev = cumulative_deviation(state)
        assert weight_dev == pytest.approx(0.10)
        assert reps_dev == pytest.approx(0.50)

    def test_identical_session_similarity_is_zero(self, point_factory) -> None:
        point = point_factory(1, [(100.0, 5)] * 3)
        assert session_similarity([_done(100.0, 5)] * 2, point) == 0.0

    def test_similarity_weights_load_over_reps(self, point_factory) -> None:
        point = point_factory(1, [(100.0, 10)])
        # 10% weight gap and 10% rep gap: 0.6 * 0.1 + 0.4 * 0.1
        assert session_similarity([_done(90.0, 9)], point) == pytest.approx(0.10)
        assert session_similarity([_done(90.0, 10)], point) == pytest.approx(0.06)

    def test_no_history_never_matches(self, barbell_compound) -> None:
        state = IntraSessionState(exercise=barbell_compound, completed=((_done(1.0, 1), SetLog()),))
        assert best_history_match(state) == float("inf")
