"""
instant-validate: declarative field validation for interactive forms.
"""

from instant_validate.core.exceptions import (
    EngineNotInitializedError,
    InstantValidateError,
    RuleConfigError,
    RuleRegistrationError,
    UnknownOperationError,
)
from instant_validate.core.models import EngineOptions, ErrorEntry, RuleConfig, ValidationResult
from instant_validate.core.rules import (
    EngineOperation,
    RuleConfigBuilder,
    RuleConfigLoader,
    ValidationEngine,
    instant_validate,
)
from instant_validate.core.validators import RuleRegistry, default_registry

__version__ = "1.0.0"

__all__ = [
    "ValidationEngine",
    "EngineOperation",
    "instant_validate",
    "EngineOptions",
    "ErrorEntry",
    "RuleConfig",
    "ValidationResult",
    "RuleRegistry",
    "default_registry",
    "RuleConfigLoader",
    "RuleConfigBuilder",
    "InstantValidateError",
    "EngineNotInitializedError",
    "UnknownOperationError",
    "RuleRegistrationError",
    "RuleConfigError",
]
