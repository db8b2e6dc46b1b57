"""
IntervalRule - the numeric value of the field must fall inside an interval.
"""

from instant_validate.core.models import RuleConfig
from instant_validate.utils.parsing import parse_float_or_zero

from .base_validator import BaseRule


class IntervalRule(BaseRule):
    """
    Validates that the value, read as a float, is within a closed interval.

    Values without a numeric prefix are read as 0, so "abc" fails
    an interval starting at 1 but passes one starting at 0.

    Parameters:
    - min: Lower bound, inclusive (default 0)
    - max: Upper bound, inclusive (default: no upper bound)
    """

    def check(self, field_name: str, value: str, config: RuleConfig) -> bool:
        number = parse_float_or_zero(value)
        min_value = config.min or 0
        max_value = config.max

        if max_value is not None:
            return min_value <= number <= max_value
        return number >= min_value

    @property
    def rule_name(self) -> str:
        return "interval"
