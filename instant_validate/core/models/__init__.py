"""
Core data models for the form validation engine.

All models use Pydantic for runtime validation and type safety.
"""

from .engine_options import DEFAULT_ERROR_MESSAGE, EngineOptions
from .error_report import ErrorEntry, ErrorReport
from .rule_config import RuleConfig
from .validation_result import ValidationResult

__all__ = [
    "DEFAULT_ERROR_MESSAGE",
    "EngineOptions",
    "ErrorEntry",
    "ErrorReport",
    "RuleConfig",
    "ValidationResult",
]
