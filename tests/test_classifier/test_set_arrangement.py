"""Tests for set-ladder shape detection."""

from __future__ import annotations

from suggestion_engine.classifier.set_arrangement import detect_set_arrangement
from suggestion_engine.models.enums import SetArrangement


class TestDetectSetArrangement:
    def test_pyramid_up(self, point_factory) -> None:
        point = point_factory(1, [(100.0, 10), (110.0, 8), (120.0, 6)])
        assert detect_set_arrangement(point) == SetArrangement.PYRAMID_UP

    def test_pyramid_down(self, point_factory) -> None:
        point = point_factory(1, [(120.0, 6), (110.0, 8), (100.0, 10)])
        assert detect_set_arrangement(point) == SetArrangement.PYRAMID_DOWN

    def test_straight_across(self, point_factory) -> None:
        point = point_factory(1, [(100.0, 5)] * 4)
        assert detect_set_arrangement(point) == SetArrangement.STRAIGHT_ACROSS

    def test_small_variation_is_still_straight(self, point_factory) -> None:
        point = point_factory(1, [(100.0, 5), (102.5, 5), (100.0, 5)])
        assert detect_set_arrangement(point) == SetArrangement.STRAIGHT_ACROSS

    def test_peak_in_the_middle_is_unclassified(self, point_factory) -> None:
        point = point_factory(1, [(100.0, 8), (130.0, 3), (100.0, 8)])
        assert detect_set_arrangement(point) is None

    def test_rise_just_under_threshold_is_not_pyramid(self, point_factory) -> None:
        point = point_factory(1, [(100.0, 8), (108.0, 8), (109.5, 8)])
        assert detect_set_arrangement(point) is None

    def test_single_set_is_straight(self, point_factory) -> None:
        assert detect_set_arrangement(point_factory(1, [(100.0, 5)])) == SetArrangement.STRAIGHT_ACROSS
