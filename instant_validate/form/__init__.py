"""
Form host capabilities and the in-memory host implementation.
"""

from .memory_form import FieldEvent, InMemoryField, InMemoryForm
from .protocols import ChangeCallback, FieldHandle, FormHost
from .rendering import ERROR_CONTAINER_CLASS, ERROR_FIELD_CLASS, render_error_block

__all__ = [
    "ChangeCallback",
    "FieldHandle",
    "FormHost",
    "FieldEvent",
    "InMemoryField",
    "InMemoryForm",
    "ERROR_CONTAINER_CLASS",
    "ERROR_FIELD_CLASS",
    "render_error_block",
]
