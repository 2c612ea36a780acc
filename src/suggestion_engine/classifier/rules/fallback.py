"""Fallback rules: too little history, or history too old to project from.

Staleness overrides any trend, however strong: after a long layoff the
projected progress no longer reflects what the lifter can do.
"""

from __future__ import annotations

from suggestion_engine.classifier.context import ClassificationContext
from suggestion_engine.classifier.rules.base import PatternRule, RuleVerdict
from suggestion_engine.models.analysis import PatternAnalysis
from suggestion_engine.models.enums import (
    MIN_SESSIONS,
    STALE_GAP_DAYS,
    PatternType,
    RulePrecedence,
)


class InsufficientDataRule(PatternRule):
    """Fewer than MIN_SESSIONS sessions — nothing to analyse."""

    rule_id = "insufficient_data"
    version = "1.0.0"
    precedence = RulePrecedence.INSUFFICIENT_DATA

    def evaluate(self, context: ClassificationContext) -> RuleVerdict:
        if context.n_points >= MIN_SESSIONS:
            return self.decline(f"{context.n_points} sessions available.")
        return RuleVerdict(
            analysis=PatternAnalysis(pattern=PatternType.FALLBACK, confidence=0.0),
            explanation=(
                f"Only {context.n_points} session(s); need {MIN_SESSIONS} "
                f"before projecting a trend."
            ),
        )


class StaleHistoryRule(PatternRule):
    """Last session more than STALE_GAP_DAYS ago."""

    rule_id = "stale_history"
    version = "1.0.0"
    precedence = RulePrecedence.STALE_HISTORY

    def evaluate(self, context: ClassificationContext) -> RuleVerdict:
        gap = context.days_since_last
        if gap <= STALE_GAP_DAYS:
            return self.decline(f"Last session {gap:.1f} days ago.")
        return RuleVerdict(
            analysis=PatternAnalysis(pattern=PatternType.FALLBACK, confidence=0.0),
            explanation=(
                f"Last session {gap:.1f} days ago exceeds the "
                f"{STALE_GAP_DAYS}-day gap; using the most recent values."
            ),
        )
