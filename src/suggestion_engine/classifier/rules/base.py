"""Abstract base class for all pattern-detection rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from suggestion_engine.classifier.context import ClassificationContext
from suggestion_engine.models.analysis import PatternAnalysis
from suggestion_engine.models.enums import RulePrecedence


@dataclass(frozen=True)
class RuleVerdict:
    """A rule's answer: an analysis when it matched, and why."""

    analysis: PatternAnalysis | None
    explanation: str = ""

    @property
    def matched(self) -> bool:
        return self.analysis is not None


class PatternRule(ABC):
    """Base class for all training-pattern rules.

    Each rule recognises one pattern (or one reason to fall back). Rules are
    discovered automatically by the RuleRegistry and evaluated by the
    PatternClassifier in precedence order; the first match wins.

    Subclasses must define:
        rule_id: unique identifier (e.g. "rep_cycling")
        version: semantic version string
        precedence: RulePrecedence tier (lower is checked first)
        evaluate(): the rule's detection logic
    """

    rule_id: str
    version: str
    precedence: RulePrecedence

    @abstractmethod
    def evaluate(self, context: ClassificationContext) -> RuleVerdict:
        """Decide whether the series shows this rule's pattern.

        Returns a RuleVerdict whose ``analysis`` is None when the rule does
        not apply. The classifier fills in confidence, set arrangement and
        the data points; rules only decide the pattern and its statistics.
        """
        ...

    def decline(self, explanation: str) -> RuleVerdict:
        return RuleVerdict(analysis=None, explanation=explanation)
