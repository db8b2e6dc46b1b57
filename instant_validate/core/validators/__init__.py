"""
Validation rule implementations.

Provides the built-in rules (notEmpty, length, interval, regex, compare),
the custom rule contract and the registry the engine resolves names against.
"""

from .base_validator import BaseRule, RuleFunction, RuleResult
from .compare_validator import CompareRule
from .custom_validator import CustomRule, call_inline, interpret_result
from .interval_validator import IntervalRule
from .length_validator import LengthRule
from .not_empty_validator import NotEmptyRule
from .regex_validator import RegexRule
from .registry import BUILTIN_RULES, RuleRegistry, default_registry

__all__ = [
    "BaseRule",
    "RuleFunction",
    "RuleResult",
    "NotEmptyRule",
    "LengthRule",
    "IntervalRule",
    "RegexRule",
    "CompareRule",
    "CustomRule",
    "call_inline",
    "interpret_result",
    "BUILTIN_RULES",
    "RuleRegistry",
    "default_registry",
]
