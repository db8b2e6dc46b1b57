"""
In-memory form host used by the CLI and tests.

Mimics the small slice of browser behaviour the engine relies on: inputs
addressed by name, user edits firing input and change events, and error
blocks inserted next to inputs.
"""

from typing import Any, Iterable, Literal, Mapping, Sequence

from pydantic import BaseModel

from .protocols import ChangeCallback
from .rendering import ERROR_FIELD_CLASS, render_error_block


class FieldEvent(BaseModel):
    """
    Event passed to change callbacks.

    Attributes:
        field_name: Name of the edited input
        value: Value of the input after the edit
        kind: "input" for keystroke-level edits, "change" for committed edits
    """

    field_name: str
    value: str
    kind: Literal["input", "change"]


class InMemoryField:
    """A named input holding a string value."""

    def __init__(self, name: str, value: Any = ""):
        self.name = name
        self._value = "" if value is None else str(value)
        self._listeners: list[ChangeCallback] = []
        self.classes: set[str] = set()
        self.error_block: str | None = None

    def value(self) -> str:
        return self._value

    def on_user_input(self, callback: ChangeCallback) -> None:
        self._listeners.append(callback)

    def type_text(self, text: str) -> None:
        """Replace the value as if typed by the user, firing an input event."""
        self._value = text
        self._fire("input")

    def commit(self) -> None:
        """Commit the current value as if the input lost focus, firing a change event."""
        self._fire("change")

    def set_value(self, text: str) -> None:
        """Type a value and commit it."""
        self.type_text(text)
        self.commit()

    @property
    def errored(self) -> bool:
        return ERROR_FIELD_CLASS in self.classes

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def _fire(self, kind: str) -> None:
        event = FieldEvent(field_name=self.name, value=self._value, kind=kind)
        for callback in list(self._listeners):
            callback(event)

    def __repr__(self) -> str:
        return f"InMemoryField(name={self.name!r}, value={self._value!r})"


class InMemoryForm:
    """
    A form made of InMemoryField inputs.

    Rendered error blocks are kept per field name so tests and the CLI
    can inspect them.
    """

    def __init__(self, fields: Iterable[InMemoryField] = ()):
        self._fields: dict[str, InMemoryField] = {}
        for field in fields:
            self.add_field(field)

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> "InMemoryForm":
        """Build a form with one input per key of the mapping."""
        return cls(InMemoryField(name, value) for name, value in values.items())

    def add_field(self, field: InMemoryField) -> InMemoryField:
        self._fields[field.name] = field
        return field

    def find_field(self, name: str) -> InMemoryField | None:
        return self._fields.get(name)

    def render_errors(self, field: InMemoryField, messages: Sequence[str]) -> None:
        field.classes.add(ERROR_FIELD_CLASS)
        field.error_block = render_error_block(messages)

    def clear_errors(self) -> None:
        for field in self._fields.values():
            field.classes.discard(ERROR_FIELD_CLASS)
            field.error_block = None

    @property
    def error_blocks(self) -> dict[str, str]:
        """Field name -> rendered error block, for every field showing errors."""
        return {
            name: field.error_block
            for name, field in self._fields.items()
            if field.error_block is not None
        }

    @property
    def field_names(self) -> list[str]:
        return list(self._fields)

    def values(self) -> dict[str, str]:
        return {name: field.value() for name, field in self._fields.items()}

    def __repr__(self) -> str:
        return f"InMemoryForm(fields={self.field_names})"
