"""Precedence-ordered registry of pattern rules.

Rules are found by importing every module of ``classifier.rules`` and
collecting the concrete PatternRule subclasses each module defines. First-match
classification needs a total order, so two different rules may not share a
precedence.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from types import ModuleType

from suggestion_engine.classifier.rules.base import PatternRule
from suggestion_engine.models.enums import RulePrecedence

logger = logging.getLogger(__name__)


def _rule_classes(module: ModuleType) -> list[type[PatternRule]]:
    """Concrete PatternRule subclasses defined (not merely imported) in ``module``."""
    return [
        cls
        for _, cls in inspect.getmembers(module, inspect.isclass)
        if issubclass(cls, PatternRule)
        and cls.__module__ == module.__name__
        and not inspect.isabstract(cls)
    ]


class RuleRegistry:
    """Holds one PatternRule per precedence slot.

    Usage::

        registry = RuleRegistry()
        registry.discover_rules()
        for rule in registry.get_all_rules():
            ...
    """

    def __init__(self) -> None:
        self._rules: dict[str, PatternRule] = {}

    def discover_rules(self) -> None:
        """Register every rule defined in the ``classifier.rules`` package."""
        import suggestion_engine.classifier.rules as rules_pkg

        for info in pkgutil.iter_modules(rules_pkg.__path__, prefix=rules_pkg.__name__ + "."):
            try:
                module = importlib.import_module(info.name)
            except ImportError as exc:
                logger.warning("Could not import rule module %s: %s", info.name, exc)
                continue
            for cls in _rule_classes(module):
                self.register(cls())

        logger.debug("Discovered pattern rules: %s", ", ".join(self.rule_ids))

    def register(self, rule: PatternRule) -> None:
        """Register ``rule``, replacing any earlier rule with the same rule_id.

        Raises:
            ValueError: If a different rule already holds ``rule.precedence``.
        """
        holder = self.at_precedence(rule.precedence)
        if holder is not None and holder.rule_id != rule.rule_id:
            raise ValueError(
                f"Precedence {int(rule.precedence)} is taken by "
                f"{holder.rule_id!r}; cannot register {rule.rule_id!r}"
            )
        self._rules[rule.rule_id] = rule

    def get(self, rule_id: str) -> PatternRule | None:
        return self._rules.get(rule_id)

    def at_precedence(self, precedence: RulePrecedence) -> PatternRule | None:
        """The rule evaluated at ``precedence``, if any."""
        for rule in self._rules.values():
            if rule.precedence == precedence:
                return rule
        return None

    def get_all_rules(self) -> list[PatternRule]:
        """Registered rules in evaluation order (lowest precedence first)."""
        return sorted(self._rules.values(), key=lambda r: r.precedence)

    @property
    def rule_ids(self) -> list[str]:
        """Rule ids in evaluation order."""
        return [rule.rule_id for rule in self.get_all_rules()]
