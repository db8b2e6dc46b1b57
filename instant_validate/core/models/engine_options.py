"""
EngineOptions model holding the caller-supplied configuration of one engine.
"""

from typing import Any, Callable

from pydantic import BaseModel, Field

DEFAULT_ERROR_MESSAGE = "Validation result negative"


class EngineOptions(BaseModel):
    """
    Options of a single validation engine instance.

    Both snake_case names and the camelCase keys of the original jQuery
    plugin (``defaultErrorMessage``, ``getField``, ``onChange``) are accepted.

    Attributes:
        config: Field name -> (rule name -> RuleConfig mapping or custom function)
        default_error_message: Message used when a rule gives no message of its own
        get_field: Optional field accessor overriding the form's own lookup
        on_change: Optional callback wired to every configured field on initialize
    """

    config: dict[str, dict[str, Any]] = Field(default_factory=dict)
    default_error_message: str = Field(DEFAULT_ERROR_MESSAGE, alias="defaultErrorMessage")
    get_field: Callable[[str], Any] | None = Field(None, alias="getField")
    on_change: Callable[..., Any] | None = Field(None, alias="onChange")

    @classmethod
    def from_raw(cls, raw: "EngineOptions | dict[str, Any] | None") -> "EngineOptions":
        """Fill defaults for every option the caller did not set."""
        if isinstance(raw, cls):
            return raw.model_copy()
        return cls.model_validate(raw or {})

    @property
    def field_names(self) -> list[str]:
        return list(self.config)

    class Config:
        populate_by_name = True
        arbitrary_types_allowed = True
        json_schema_extra = {
            "example": {
                "config": {
                    "login": {
                        "notEmpty": {"message": "Username is required and cannot be empty"},
                        "length": {"min": 3, "message": "Value should be at least 3 symbols"},
                    },
                    "password": {
                        "notEmpty": {"message": "Password is required and cannot be empty"},
                    },
                },
                "defaultErrorMessage": "Validation result negative",
            }
        }
