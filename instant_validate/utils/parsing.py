"""
Lenient number parsing for raw field values.

Field values always arrive as strings typed by a user, so numeric rules
read the longest numeric prefix the way a browser's ``parseFloat`` does:
"12px" is 12, " 3.5e2kg" is 350 and "abc" is NaN.
"""

import math
import re

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def parse_float(value: str | None) -> float:
    """
    Parse the leading float of a string.

    Args:
        value: Raw field value

    Returns:
        The parsed number, or NaN when the string has no numeric prefix

    Examples:
        >>> parse_float("42")
        42.0
        >>> parse_float("  -1.5e1 apples")
        -15.0
        >>> math.isnan(parse_float("abc"))
        True
    """
    if value is None:
        return math.nan

    match = _FLOAT_PREFIX.match(str(value).lstrip())
    if not match:
        return math.nan

    text = match.group(0)
    if text.endswith("Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def parse_float_or_zero(value: str | None) -> float:
    """Parse the leading float of a string, mapping NaN to 0."""
    number = parse_float(value)
    return 0.0 if math.isnan(number) else number
