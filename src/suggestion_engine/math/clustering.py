"""Two-band split for dual-progression (rep cycling) histories.

A median split on session average weight separates heavy from light
sessions. Sessions exactly at the median join the light band; if that leaves
the heavy band empty (many sessions tied at the median), the median group
joins the heavy band instead.

When the load barely moves between sessions, the weight split cannot
separate the bands and the series is split on reps instead: sessions below
the rep median form the heavy (low-rep) band. A rep split only counts when
consecutive sessions actually switch bands; steady rep progression at one
load is not cycling.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from suggestion_engine.models.analysis import ClusterData
from suggestion_engine.models.data_point import ExerciseDataPoint
from suggestion_engine.models.enums import CLUSTER_MIN_WEIGHT_GAP, REP_ALTERNATION_MIN_RATE


def alternation_rate(flags: Sequence[bool]) -> float:
    """Fraction of consecutive pairs whose flags differ (0.0 for fewer than two)."""
    if len(flags) < 2:
        return 0.0
    switches = sum(1 for prev, curr in zip(flags, flags[1:]) if prev != curr)
    return switches / (len(flags) - 1)


def split_weight_bands(points: Sequence[ExerciseDataPoint]) -> ClusterData | None:
    """Split a chronological series into heavy and light bands.

    Args:
        points: Data points, oldest first.

    Returns:
        ClusterData with both bands in chronological order and
        ``next_is_heavy`` set to the opposite of the most recent session's
        band, or None when the series does not separate into two distinct
        weight bands.
    """
    if len(points) < 2:
        return None

    weights = np.array([p.avg_weight for p in points], dtype=np.float64)
    median = float(np.median(weights))

    is_heavy = weights > median
    if not is_heavy.any():
        is_heavy = weights >= median

    heavy = tuple(p for p, flag in zip(points, is_heavy) if flag)
    light = tuple(p for p, flag in zip(points, is_heavy) if not flag)
    if not heavy or not light:
        return None

    heavy_mean = float(np.mean([p.avg_weight for p in heavy]))
    light_mean = float(np.mean([p.avg_weight for p in light]))
    if light_mean > 0:
        if (heavy_mean - light_mean) / light_mean < CLUSTER_MIN_WEIGHT_GAP:
            return None
    elif heavy_mean <= 0:
        return None

    last_is_heavy = bool(is_heavy[-1])
    return ClusterData(heavy=heavy, light=light, next_is_heavy=not last_is_heavy)


def split_rep_bands(points: Sequence[ExerciseDataPoint]) -> ClusterData | None:
    """Split on average reps: below-median sessions are the heavy band.

    Returns None when every session sits on the same side of the median, or
    when sessions switch bands less often than REP_ALTERNATION_MIN_RATE.
    """
    if len(points) < 2:
        return None

    reps = np.array([p.avg_reps for p in points], dtype=np.float64)
    median = float(np.median(reps))
    is_heavy = reps < median

    heavy = tuple(p for p, flag in zip(points, is_heavy) if flag)
    light = tuple(p for p, flag in zip(points, is_heavy) if not flag)
    if not heavy or not light:
        return None
    if alternation_rate([bool(flag) for flag in is_heavy]) < REP_ALTERNATION_MIN_RATE:
        return None

    return ClusterData(heavy=heavy, light=light, next_is_heavy=not bool(is_heavy[-1]))


def split_bands(points: Sequence[ExerciseDataPoint]) -> ClusterData | None:
    """Weight-band split, falling back to the rep-band split."""
    clusters = split_weight_bands(points)
    if clusters is None:
        clusters = split_rep_bands(points)
    return clusters
