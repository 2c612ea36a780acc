"""PatternClassifier — evaluates pattern rules in precedence order.

The first rule whose verdict carries an analysis decides the pattern; later
rules are recorded as not evaluated in the trace. The classifier then
attaches the data points, the set arrangement and the confidence score.
"""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from functools import lru_cache
from typing import Sequence

from suggestion_engine.classifier.context import ClassificationContext
from suggestion_engine.classifier.registry import RuleRegistry
from suggestion_engine.classifier.set_arrangement import detect_set_arrangement
from suggestion_engine.clock import resolve_now
from suggestion_engine.history.extractor import drop_malformed
from suggestion_engine.math.confidence import compute_confidence
from suggestion_engine.models.analysis import PatternAnalysis
from suggestion_engine.models.classification_trace import (
    ClassificationTrace,
    RuleResult,
    RuleStatus,
)
from suggestion_engine.models.data_point import ExerciseDataPoint
from suggestion_engine.models.enums import PATTERN_FIT_PRIOR, PatternType
from suggestion_engine.models.exercise import ExerciseInfo

logger = logging.getLogger(__name__)

# Fit for a custom rule that reports neither R² nor a prior
_DEFAULT_FIT_PRIOR = 0.5


class PatternClassifier:
    """Classifies an exercise's data-point series into a training pattern.

    Usage:
        classifier = PatternClassifier()
        analysis, trace = classifier.classify(points, exercise)
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        if registry is None:
            registry = RuleRegistry()
            registry.discover_rules()
        self.registry = registry

    def classify(
        self,
        points: Sequence[ExerciseDataPoint],
        exercise: ExerciseInfo,
        now: datetime | None = None,
    ) -> tuple[PatternAnalysis, ClassificationTrace]:
        """Classify a chronological series of data points.

        Args:
            points: Data points, oldest first. Points that violate the input
                contract are dropped with a warning.
            exercise: Catalog entry (compound flag selects the R² threshold).
            now: Reference instant for staleness and recency.

        Returns:
            A tuple of (PatternAnalysis, ClassificationTrace).
        """
        context = ClassificationContext(
            points=tuple(drop_malformed(points)),
            exercise=exercise,
            now=resolve_now(now),
        )

        rule_results: list[RuleResult] = []
        analysis: PatternAnalysis | None = None

        for rule in self.registry.get_all_rules():
            if analysis is not None:
                rule_results.append(
                    RuleResult(rule_id=rule.rule_id, status=RuleStatus.NOT_EVALUATED)
                )
                continue

            verdict = rule.evaluate(context)
            status = RuleStatus.MATCHED if verdict.matched else RuleStatus.DECLINED
            rule_results.append(
                RuleResult(rule_id=rule.rule_id, status=status, explanation=verdict.explanation)
            )
            if verdict.matched:
                analysis = verdict.analysis

        if analysis is None:
            # Only reachable with a custom registry lacking a catch-all rule
            analysis = PatternAnalysis(pattern=PatternType.FALLBACK)

        analysis = self._finalize(analysis, context)
        logger.debug(
            "Classified %s as %s (confidence %.2f, %d points)",
            exercise.name,
            analysis.pattern.name,
            analysis.confidence,
            context.n_points,
        )

        trace = ClassificationTrace(rule_results=tuple(rule_results), final_analysis=analysis)
        return analysis, trace

    @staticmethod
    def _finalize(analysis: PatternAnalysis, context: ClassificationContext) -> PatternAnalysis:
        """Attach data points, set arrangement and confidence."""
        set_pattern = detect_set_arrangement(context.last) if context.points else None
        if analysis.pattern == PatternType.FALLBACK:
            return dataclasses.replace(
                analysis,
                confidence=0.0,
                data_points=context.points,
                set_pattern=set_pattern,
            )

        if analysis.r_squared is not None:
            fit = analysis.r_squared
        else:
            fit = PATTERN_FIT_PRIOR.get(analysis.pattern, _DEFAULT_FIT_PRIOR)

        return dataclasses.replace(
            analysis,
            data_points=context.points,
            set_pattern=set_pattern,
            confidence=compute_confidence(fit, context.n_points, context.days_since_last),
        )


@lru_cache(maxsize=1)
def default_classifier() -> PatternClassifier:
    """Shared classifier over the auto-discovered rules (rules are stateless)."""
    return PatternClassifier()


def analyze_pattern(
    points: Sequence[ExerciseDataPoint],
    exercise: ExerciseInfo,
    now: datetime | None = None,
) -> PatternAnalysis:
    """Classify ``points`` with the default rule set and return the analysis."""
    analysis, _ = default_classifier().classify(points, exercise, now=now)
    return analysis
