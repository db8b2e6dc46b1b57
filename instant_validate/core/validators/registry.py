"""
Rule registry mapping rule names to rule callables.
"""

from typing import Iterator

from instant_validate.core.exceptions import RuleRegistrationError
from instant_validate.observability.logger import get_logger

from .base_validator import BaseRule, RuleFunction
from .compare_validator import CompareRule
from .custom_validator import CustomRule
from .interval_validator import IntervalRule
from .length_validator import LengthRule
from .not_empty_validator import NotEmptyRule
from .regex_validator import RegexRule

logger = get_logger(__name__)

BUILTIN_RULES: tuple[BaseRule, ...] = (
    NotEmptyRule(),
    LengthRule(),
    IntervalRule(),
    RegexRule(),
    CompareRule(),
)


class RuleRegistry:
    """
    Name -> rule lookup used by the validation engine.

    Lookups of unknown names return None rather than raising, so a
    configuration may mention rules this registry does not know yet.
    """

    def __init__(self, rules: dict[str, BaseRule | CustomRule] | None = None):
        self._rules: dict[str, BaseRule | CustomRule] = dict(rules or {})

    def register(self, name: str, rule: BaseRule | RuleFunction) -> "RuleRegistry":
        """
        Register a rule under a name, replacing any rule already registered there.

        Args:
            name: Rule name as used in field configurations
            rule: A BaseRule instance or a plain function
                  ``(field_name, value, config) -> bool | str``

        Returns:
            The registry, for chaining

        Raises:
            RuleRegistrationError: If the name is empty or the rule is not callable
        """
        if not name or not isinstance(name, str):
            raise RuleRegistrationError("Rule name must be a non-empty string")
        if not callable(rule):
            raise RuleRegistrationError(f"Rule '{name}' must be callable, got {type(rule).__name__}")

        if name in self._rules:
            logger.debug(f"Replacing rule '{name}'")

        if isinstance(rule, (BaseRule, CustomRule)):
            self._rules[name] = rule
        else:
            self._rules[name] = CustomRule(name, rule)
        return self

    def unregister(self, name: str) -> None:
        """Remove a rule; unknown names are ignored."""
        self._rules.pop(name, None)

    def get(self, name: str) -> BaseRule | CustomRule | None:
        return self._rules.get(name)

    def is_builtin(self, name: str) -> bool:
        return isinstance(self._rules.get(name), BaseRule)

    def names(self) -> list[str]:
        return list(self._rules)

    def copy(self) -> "RuleRegistry":
        return RuleRegistry(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleRegistry(rules={self.names()})"


def default_registry() -> RuleRegistry:
    """Return a new registry holding the built-in rules."""
    return RuleRegistry({rule.rule_name: rule for rule in BUILTIN_RULES})
