"""
Base rule interface for all built-in validation rules.

A rule is any callable ``(field_name, value, config) -> bool | str``.
Built-in rules inherit from BaseRule and implement check(); they only ever
return booleans. A string result is a failure carrying its own message and
is only produced by custom rules.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Union

from instant_validate.core.models import RuleConfig

RuleResult = Union[bool, str]
RuleFunction = Callable[[str, str, Any], Any]


class BaseRule(ABC):
    """
    Abstract base class for built-in rules.

    Instances are stateless and shared by every field the rule is
    configured on; the per-field parameters arrive with each call.
    """

    @abstractmethod
    def check(self, field_name: str, value: str, config: RuleConfig) -> bool:
        """
        Evaluate a value against this rule.

        Args:
            field_name: Name of the field being validated
            value: The raw string value of the field
            config: Rule parameters for this field

        Returns:
            True if the value passes the rule
        """
        pass

    @property
    @abstractmethod
    def rule_name(self) -> str:
        """Return the name the rule is registered under."""
        pass

    def __call__(self, field_name: str, value: str, config: Any = None) -> bool:
        return bool(self.check(field_name, value, RuleConfig.from_raw(config)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.rule_name})"
