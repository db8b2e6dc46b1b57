"""
Capabilities the validation engine consumes from its host environment.

The engine never touches a page directly: it reads values through
FieldHandle, renders and clears errors through FormHost and subscribes
to user input through FieldHandle.on_user_input.
"""

from typing import Any, Callable, Protocol, Sequence, runtime_checkable

ChangeCallback = Callable[[Any], Any]


@runtime_checkable
class FieldHandle(Protocol):
    """Protocol for a single form input."""

    def value(self) -> str:
        """Current raw value of the input."""
        ...

    def on_user_input(self, callback: ChangeCallback) -> None:
        """
        Subscribe to user edits of the input.

        The callback fires on every keystroke-level change and again on
        every committed change (blur, select, paste).
        """
        ...


@runtime_checkable
class FormHost(Protocol):
    """Protocol for the form an engine is attached to."""

    def find_field(self, name: str) -> FieldHandle | None:
        """Look up an input by its name, or None when the form has no such input."""
        ...

    def render_errors(self, field: FieldHandle, messages: Sequence[str]) -> None:
        """Insert an error block after the field and mark the field as errored."""
        ...

    def clear_errors(self) -> None:
        """Remove every error block and errored marker inside the form."""
        ...
