"""
Exception hierarchy for instant-validate.

Rule failures are never raised: they are collected into the error report.
These exceptions cover programmer misuse and malformed configuration only.
"""


class InstantValidateError(Exception):
    """Base class for all instant-validate errors."""
    pass


class EngineNotInitializedError(InstantValidateError):
    """Raised when an engine operation is used before initialize()."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"Cannot call '{operation}' before the engine is initialized")


class UnknownOperationError(InstantValidateError):
    """Raised when a method name does not map to an engine operation."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Method named '{method}' does not exist in instant_validate")


class RuleRegistrationError(InstantValidateError):
    """Raised when a rule cannot be registered."""
    pass


class RuleConfigError(InstantValidateError, ValueError):
    """Raised when a rule configuration file is malformed."""
    pass
