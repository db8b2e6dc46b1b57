"""
RegexRule - the field value must contain a match for a regular expression.
"""

import re

from instant_validate.core.models import RuleConfig

from .base_validator import BaseRule


class RegexRule(BaseRule):
    """
    Validates the value against a regular expression.

    The pattern may match anywhere in the value; anchor it with ^ and $
    to match the whole value. An empty or absent pattern matches everything.

    Parameters:
    - pattern: Regular expression pattern (default "")
    - flags: Optional regex flags (e.g., re.IGNORECASE)
    """

    def check(self, field_name: str, value: str, config: RuleConfig) -> bool:
        pattern = re.compile(config.pattern or "", config.flags)
        return pattern.search(value) is not None

    @property
    def rule_name(self) -> str:
        return "regex"
