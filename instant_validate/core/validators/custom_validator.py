"""
CustomRule - validates using a caller-supplied function.
"""

from typing import Any

from instant_validate.core.models import RuleConfig

from .base_validator import RuleFunction


def interpret_result(result: Any, fallback_message: str) -> str | None:
    """
    Turn the return value of a custom rule into a failure message.

    Args:
        result: Whatever the custom function returned
        fallback_message: Message used when the function failed without one

    Returns:
        None if the rule passed, otherwise the failure message

    Examples:
        >>> interpret_result(True, "bad") is None
        True
        >>> interpret_result("too short", "bad")
        'too short'
        >>> interpret_result(False, "bad")
        'bad'
    """
    if isinstance(result, str):
        return result if result else fallback_message
    if not result:
        return fallback_message
    return None


class CustomRule:
    """
    Wraps a function registered under a rule name.

    Registered functions are called as ``func(field_name, value, config)``
    with the field's RuleConfig and may return:
    - True (or any truthy non-string) to pass
    - a non-empty string to fail with that message
    - False (or any other falsy value) to fail with the configured message

    Functions given inline in a field's configuration are not wrapped;
    see ``call_inline``.
    """

    def __init__(self, name: str, func: RuleFunction):
        self.name = name
        self.func = func

    def __call__(self, field_name: str, value: str, config: Any = None) -> Any:
        return self.func(field_name, value, RuleConfig.from_raw(config))

    @property
    def rule_name(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"CustomRule(name={self.name}, func={getattr(self.func, '__name__', self.func)!r})"


def call_inline(func: RuleFunction, field_name: str, value: str) -> Any:
    """
    Invoke a custom rule given inline in a field's configuration.

    The function receives itself as its config argument. This mirrors the
    calling convention of the original jQuery plugin and is kept so that
    existing rule functions work unchanged.
    """
    return func(field_name, value, func)
