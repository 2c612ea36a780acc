"""Stable — flat or noisy trend with adequate data. Always matches."""

from __future__ import annotations

from suggestion_engine.classifier.context import ClassificationContext
from suggestion_engine.classifier.rules.base import PatternRule, RuleVerdict
from suggestion_engine.models.analysis import PatternAnalysis
from suggestion_engine.models.enums import PatternType, RulePrecedence


class StableRule(PatternRule):
    rule_id = "stable"
    version = "1.0.0"
    precedence = RulePrecedence.STABLE

    def evaluate(self, context: ClassificationContext) -> RuleVerdict:
        trend = context.top_set_trend
        return RuleVerdict(
            analysis=PatternAnalysis(
                pattern=PatternType.STABLE,
                slope=trend.slope,
                r_squared=trend.r_squared,
            ),
            explanation=f"No stronger pattern; slope {trend.slope:+.2f}, R²={trend.r_squared:.2f}.",
        )
