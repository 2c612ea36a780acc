"""Progressive overload — top-set load climbing steadily session over session."""

from __future__ import annotations

from suggestion_engine.classifier.context import ClassificationContext
from suggestion_engine.classifier.rules.base import PatternRule, RuleVerdict
from suggestion_engine.models.analysis import PatternAnalysis
from suggestion_engine.models.enums import (
    R_SQUARED_COMPOUND,
    R_SQUARED_ISOLATION,
    PatternType,
    RulePrecedence,
)


class ProgressiveOverloadRule(PatternRule):
    """Positive top-set trend with a good enough linear fit.

    Compound lifts need a tighter fit (R² ≥ 0.6) than isolation work
    (R² ≥ 0.5), which tends to progress more erratically.
    """

    rule_id = "progressive_overload"
    version = "1.0.0"
    precedence = RulePrecedence.PROGRESSIVE_OVERLOAD

    def evaluate(self, context: ClassificationContext) -> RuleVerdict:
        trend = context.top_set_trend
        threshold = R_SQUARED_COMPOUND if context.exercise.is_compound else R_SQUARED_ISOLATION

        if trend.slope <= 0:
            return self.decline(f"Slope {trend.slope:+.2f}/session is not positive.")
        if trend.r_squared < threshold:
            return self.decline(f"R²={trend.r_squared:.2f} below {threshold}.")

        return RuleVerdict(
            analysis=PatternAnalysis(
                pattern=PatternType.PROGRESSIVE_OVERLOAD,
                slope=trend.slope,
                r_squared=trend.r_squared,
            ),
            explanation=(
                f"Top set rising {trend.slope:+.2f}/session with "
                f"R²={trend.r_squared:.2f} (threshold {threshold})."
            ),
        )
