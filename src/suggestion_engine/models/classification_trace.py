"""Classification trace — audit trail of how the classifier reached its pattern."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import auto, IntEnum

from suggestion_engine.models.analysis import PatternAnalysis


class RuleStatus(IntEnum):
    """Whether a detection rule matched, declined, or was never reached."""

    MATCHED = auto()
    DECLINED = auto()
    NOT_EVALUATED = auto()


@dataclass(frozen=True)
class RuleResult:
    """Record of a single detection rule during one classification."""

    rule_id: str
    status: RuleStatus
    explanation: str = ""


@dataclass(frozen=True)
class ClassificationTrace:
    """Every rule's outcome for one classify() call, in precedence order."""

    rule_results: tuple[RuleResult, ...] = field(default_factory=tuple)
    final_analysis: PatternAnalysis | None = None

    @property
    def matched_rule_id(self) -> str | None:
        for result in self.rule_results:
            if result.status == RuleStatus.MATCHED:
                return result.rule_id
        return None
