"""
ValidationResult model representing the outcome of one validation pass (ephemeral).
"""

from pydantic import BaseModel, Field, field_validator


class ValidationResult(BaseModel):
    """
    Snapshot of a validation pass, detached from the live field handles.

    Attributes:
        valid: Overall validation status
        errors: Field name -> failure messages, in configuration order
        fields_checked: Number of configured fields that were evaluated
        rules_checked: Number of rules that were resolved and invoked
        rules_skipped: Number of rule names that did not resolve to a rule
    """

    valid: bool
    errors: dict[str, list[str]] = Field(default_factory=dict)
    fields_checked: int = Field(0, ge=0)
    rules_checked: int = Field(0, ge=0)
    rules_skipped: int = Field(0, ge=0)

    @field_validator("errors")
    @classmethod
    def check_valid_consistency(cls, v, info):
        """Validate that valid=True implies errors is empty."""
        if info.data.get("valid") and len(v) > 0:
            raise ValueError("valid=True but errors is not empty")
        return v

    @property
    def failed_fields(self) -> list[str]:
        return list(self.errors)

    class Config:
        json_schema_extra = {
            "example": {
                "valid": False,
                "errors": {
                    "login": ["Username is required and cannot be empty"],
                    "confirm_password": ["Passwords should match"],
                },
                "fields_checked": 3,
                "rules_checked": 4,
                "rules_skipped": 0,
            }
        }
