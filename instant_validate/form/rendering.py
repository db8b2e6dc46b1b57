"""
Error block markup shared by form hosts.
"""

from html import escape
from typing import Sequence

ERROR_CONTAINER_CLASS = "iv-error-container"
ERROR_FIELD_CLASS = "iv-error-field"


def render_error_block(messages: Sequence[str]) -> str:
    """
    Build the error block inserted after an errored field.

    A single message is rendered as plain text inside the container,
    several messages as an unordered list in configuration order.
    Messages are HTML-escaped.

    Examples:
        >>> render_error_block(["Required"])
        '<div class="iv-error-container">Required</div>'
        >>> render_error_block(["a", "b"])
        '<div class="iv-error-container"><ul><li>a</li><li>b</li></ul></div>'
    """
    if len(messages) == 1:
        body = escape(messages[0])
    else:
        items = "".join(f"<li>{escape(message)}</li>" for message in messages)
        body = f"<ul>{items}</ul>"
    return f'<div class="{ERROR_CONTAINER_CLASS}">{body}</div>'
