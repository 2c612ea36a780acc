"""Deload — a sharp volume drop after a long block of training."""

from __future__ import annotations

import math

import numpy as np
import pandas as pd

from suggestion_engine.classifier.context import ClassificationContext
from suggestion_engine.classifier.rules.base import PatternRule, RuleVerdict
from suggestion_engine.models.analysis import PatternAnalysis
from suggestion_engine.models.enums import (
    DELOAD_TRAILING_SESSIONS,
    DELOAD_VOLUME_DROP,
    MIN_WEEKS_DELOAD_AUTO,
    PatternType,
    RulePrecedence,
)


def trailing_volume_average(volumes: list[float] | tuple[float, ...]) -> float:
    """Mean volume of the sessions before the last one.

    Uses a rolling window of DELOAD_TRAILING_SESSIONS over the series shifted
    by one, so the most recent session never counts toward its own baseline.

    Returns:
        The trailing average, or 0.0 when there is no earlier session.
    """
    if len(volumes) < 2:
        return 0.0
    series = pd.Series(volumes, dtype=np.float64)
    trailing = series.shift(1).rolling(window=DELOAD_TRAILING_SESSIONS, min_periods=1).mean()
    value = float(trailing.iloc[-1])
    return 0.0 if math.isnan(value) else value


class DeloadRule(PatternRule):
    """Last session's volume well below the trailing average."""

    rule_id = "deload"
    version = "1.0.0"
    precedence = RulePrecedence.DELOAD

    def evaluate(self, context: ClassificationContext) -> RuleVerdict:
        min_span_days = MIN_WEEKS_DELOAD_AUTO * 7
        if context.history_span_days < min_span_days:
            return self.decline(
                f"History spans {context.history_span_days:.0f} days; "
                f"need {min_span_days}."
            )

        baseline = trailing_volume_average([p.total_volume for p in context.points])
        if baseline <= 0:
            return self.decline("No trailing volume to compare against.")

        drop = 1.0 - context.last.total_volume / baseline
        if drop < DELOAD_VOLUME_DROP:
            return self.decline(f"Volume drop {drop:.0%} below {DELOAD_VOLUME_DROP:.0%}.")

        return RuleVerdict(
            analysis=PatternAnalysis(pattern=PatternType.DELOAD),
            explanation=(
                f"Last volume {context.last.total_volume:.0f} is {drop:.0%} under "
                f"the trailing average {baseline:.0f}."
            ),
        )
