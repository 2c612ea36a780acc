"""Ordinary least-squares trend fitting and dispersion helpers.

Trends are fitted against the session index (0, 1, 2, ...) rather than the
calendar date, so an irregular training schedule does not distort the
per-session slope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

# Slopes smaller than this are floating-point noise from a flat series
_SLOPE_EPSILON = 1e-12


@dataclass(frozen=True)
class LinearTrend:
    """Result of fitting y = slope * index + intercept.

    Attributes:
        slope: Change in y per session.
        intercept: Fitted y at index 0.
        r_squared: Coefficient of determination (0 when y is constant).
    """

    slope: float
    intercept: float
    r_squared: float

    def predict(self, index: float) -> float:
        return self.slope * index + self.intercept


def fit_linear_trend(values: Sequence[float]) -> LinearTrend:
    """Fit an OLS line through ``values`` against their index.

    Uses numpy.polyfit on (index, value) pairs. Fewer than two values carry
    no trend: the slope and R² are zero and the intercept is the single value
    (or 0.0 for an empty series).

    Args:
        values: Observations in chronological order (oldest first).

    Returns:
        LinearTrend with slope, intercept and R².
    """
    n = len(values)
    if n == 0:
        return LinearTrend(slope=0.0, intercept=0.0, r_squared=0.0)
    if n == 1:
        return LinearTrend(slope=0.0, intercept=float(values[0]), r_squared=0.0)

    x = np.arange(n, dtype=np.float64)
    y = np.asarray(values, dtype=np.float64)

    # numpy.polyfit(x, y, 1) returns [slope, intercept]
    coeffs = np.polyfit(x, y, 1)
    slope = float(coeffs[0])
    intercept = float(coeffs[1])
    if abs(slope) < _SLOPE_EPSILON:
        slope = 0.0

    y_predicted = slope * x + intercept
    ss_res = float(np.sum((y - y_predicted) ** 2))
    ss_tot = float(np.sum((y - np.mean(y)) ** 2))
    r_squared = 1.0 - (ss_res / ss_tot) if ss_tot > 0 else 0.0

    return LinearTrend(slope=slope, intercept=intercept, r_squared=max(0.0, r_squared))


def population_stddev(values: Sequence[float]) -> float:
    """Population standard deviation (ddof=0); 0.0 for fewer than two values."""
    if len(values) < 2:
        return 0.0
    return float(np.std(np.asarray(values, dtype=np.float64), ddof=0))


def relative_increase(slope: float, reference: float) -> float:
    """Express a per-session slope as a fraction of ``reference``.

    Negative slopes and non-positive references imply no increase.
    """
    if reference <= 0 or slope <= 0:
        return 0.0
    return slope / reference
