"""
CompareRule - the numeric value of the field is compared to a reference value.
"""

import operator as op

from instant_validate.core.models import RuleConfig
from instant_validate.utils.parsing import parse_float

from .base_validator import BaseRule


class CompareRule(BaseRule):
    """
    Compares the value, read as a float, against a reference ("etalon").

    Values without a numeric prefix are NaN, which fails every
    comparison except "!=".

    Parameters:
    - operator: One of =, ===, >=, <=, >, <, != (default "=");
                unknown operators fall back to strict equality
    - etalon: Reference value (default 0)
    """

    OPERATORS = {
        "=": op.eq,
        "===": op.eq,
        ">=": op.ge,
        "<=": op.le,
        ">": op.gt,
        "<": op.lt,
        "!=": op.ne,
    }

    def check(self, field_name: str, value: str, config: RuleConfig) -> bool:
        number = parse_float(value)
        etalon = config.etalon or 0
        compare = self.OPERATORS.get(config.operator or "=", op.eq)
        return compare(number, etalon)

    @property
    def rule_name(self) -> str:
        return "compare"
