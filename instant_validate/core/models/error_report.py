"""
ErrorEntry model and the ErrorReport mapping built by one validation pass.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorEntry(BaseModel):
    """
    Failure messages collected for one field during a validation pass.

    Attributes:
        field: The field handle the messages belong to (None when the
               field accessor could not resolve the field)
        messages: One message per failed rule, in configuration order
    """

    field: Any = None
    messages: list[str] = Field(default_factory=list)

    def add(self, message: str) -> None:
        self.messages.append(message)

    class Config:
        arbitrary_types_allowed = True


# Field name -> ErrorEntry; an empty report means the form is valid.
ErrorReport = dict[str, ErrorEntry]
