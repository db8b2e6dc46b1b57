"""
NotEmptyRule - the field value must contain at least one character.
"""

from instant_validate.core.models import RuleConfig

from .base_validator import BaseRule


class NotEmptyRule(BaseRule):
    """
    Passes when the value is non-empty.

    Whitespace counts as content: "  " passes. Takes no parameters
    other than the optional message.
    """

    def check(self, field_name: str, value: str, config: RuleConfig) -> bool:
        return len(value) > 0

    @property
    def rule_name(self) -> str:
        return "notEmpty"
