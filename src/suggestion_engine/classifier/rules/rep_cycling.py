"""Rep cycling (dual progression) — alternating heavy/low-rep and light/high-rep sessions."""

from __future__ import annotations

from suggestion_engine.classifier.context import ClassificationContext
from suggestion_engine.classifier.rules.base import PatternRule, RuleVerdict
from suggestion_engine.math.clustering import split_bands
from suggestion_engine.models.analysis import PatternAnalysis
from suggestion_engine.models.enums import (
    MIN_SESSIONS_REP_CYCLING,
    REP_CYCLING_STDDEV,
    PatternType,
    RulePrecedence,
)


class RepCyclingRule(PatternRule):
    """Detects two distinct load bands with widely spread rep counts."""

    rule_id = "rep_cycling"
    version = "1.0.0"
    precedence = RulePrecedence.REP_CYCLING

    def evaluate(self, context: ClassificationContext) -> RuleVerdict:
        if context.n_points < MIN_SESSIONS_REP_CYCLING:
            return self.decline(
                f"Need {MIN_SESSIONS_REP_CYCLING} sessions, have {context.n_points}."
            )

        spread = context.rep_stddev
        if spread <= REP_CYCLING_STDDEV:
            return self.decline(f"Rep stddev {spread:.2f} within {REP_CYCLING_STDDEV}.")

        clusters = split_bands(context.points)
        if clusters is None:
            return self.decline("Sessions do not separate into heavy and light bands.")

        band = "heavy" if clusters.next_is_heavy else "light"
        return RuleVerdict(
            analysis=PatternAnalysis(pattern=PatternType.REP_CYCLING, clusters=clusters),
            explanation=(
                f"Rep stddev {spread:.2f} with {len(clusters.heavy)} heavy and "
                f"{len(clusters.light)} light sessions; next session is {band}."
            ),
        )
