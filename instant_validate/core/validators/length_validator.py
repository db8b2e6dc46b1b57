"""
LengthRule - the number of characters in the value must be within bounds.
"""

from instant_validate.core.models import RuleConfig

from .base_validator import BaseRule


class LengthRule(BaseRule):
    """
    Validates the length of the raw string value.

    Parameters:
    - min: Minimum length, inclusive (default 0)
    - max: Maximum length, inclusive (default: no upper bound)
    """

    def check(self, field_name: str, value: str, config: RuleConfig) -> bool:
        min_length = config.min or 0
        max_length = config.max

        if max_length is not None:
            return min_length <= len(value) <= max_length
        return len(value) >= min_length

    @property
    def rule_name(self) -> str:
        return "length"
