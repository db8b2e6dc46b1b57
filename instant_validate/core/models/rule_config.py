"""
RuleConfig model holding the parameters of one rule applied to one field.
"""

import math
import re
from typing import Any, Mapping

from pydantic import BaseModel, field_validator


def _loose_number(value: Any) -> float | None:
    """
    Coerce a loosely typed numeric parameter.

    Falsy values (None, "", 0, False) and anything that is not a finite
    number or numeric string collapse to None, which makes the rule use
    its default.
    """
    if value is None or value is False or value == "":
        return None
    if isinstance(value, bool):
        value = 1
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or number == 0:
        return None
    return number


class RuleConfig(BaseModel):
    """
    Parameters for a single rule on a single field.

    Every attribute is optional and each rule applies its own default
    when an attribute is absent. Unknown keys are kept as extra attributes
    so registered custom rules can read their own parameters.

    Attributes:
        min: Lower bound for ``length`` and ``interval`` (default 0)
        max: Upper bound for ``length`` and ``interval`` (default: unbounded)
        pattern: Regular expression for ``regex`` (default: empty, matches all)
        flags: ``re`` flags used when compiling ``pattern``
        operator: Comparison operator for ``compare`` (default "=")
        etalon: Reference value for ``compare`` (default 0)
        message: Error message override for any rule
    """

    min: float | None = None
    max: float | None = None
    pattern: str | None = None
    flags: int = 0
    operator: str | None = None
    etalon: float | None = None
    message: str | None = None

    @field_validator("min", "max", "etalon", mode="before")
    @classmethod
    def coerce_number(cls, v):
        return _loose_number(v)

    @field_validator("pattern", mode="before")
    @classmethod
    def coerce_pattern(cls, v):
        """Accept compiled patterns as well as strings."""
        if isinstance(v, re.Pattern):
            return v.pattern
        if v is None or v == "":
            return None
        return str(v)

    @field_validator("operator", "message", mode="before")
    @classmethod
    def empty_string_is_unset(cls, v):
        if v is None or v == "":
            return None
        return str(v)

    @classmethod
    def from_raw(cls, raw: Any) -> "RuleConfig":
        """
        Build a RuleConfig from a mapping, passing existing instances through.

        Anything that is not a mapping (None, True, a bare string) yields
        an empty config, so `notEmpty: true` and `notEmpty: {}` are equivalent.
        """
        if isinstance(raw, cls):
            return raw
        if not isinstance(raw, Mapping):
            return cls()
        return cls.model_validate(dict(raw))

    class Config:
        extra = "allow"
        json_schema_extra = {
            "example": {
                "min": 3,
                "max": 16,
                "message": "Username should be 3 to 16 symbols long",
            }
        }
