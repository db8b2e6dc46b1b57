"""
Single entry point dispatching engine operations by name.

``instant_validate(form, ...)`` keeps one engine per form. Passing options
(or nothing) initializes it, passing an operation name runs that operation
with the remaining arguments. Unknown names are logged and yield False.
"""

from enum import Enum
from typing import Any, Mapping
from weakref import WeakKeyDictionary

from instant_validate.core.exceptions import UnknownOperationError
from instant_validate.core.models import EngineOptions
from instant_validate.observability.logger import get_logger

from .rule_engine import ValidationEngine

logger = get_logger(__name__)


class EngineOperation(str, Enum):
    """Operations an attached engine exposes through instant_validate()."""

    INITIALIZE = "initialize"
    VALIDATE = "validate"
    CLEAR = "clear"
    IS_VALID = "is_valid"
    SET_ON_CHANGE = "set_on_change"

    @classmethod
    def parse(cls, method: "str | EngineOperation") -> "EngineOperation":
        """
        Resolve a method name, accepting the camelCase names of the jQuery plugin.

        Raises:
            UnknownOperationError: If the name matches no operation
        """
        if isinstance(method, cls):
            return method
        if isinstance(method, str):
            operation = _ALIASES.get(method)
            if operation is not None:
                return operation
            try:
                return cls(method)
            except ValueError:
                pass
        raise UnknownOperationError(str(method))


_ALIASES = {
    "init": EngineOperation.INITIALIZE,
    "isValid": EngineOperation.IS_VALID,
    "setOnChange": EngineOperation.SET_ON_CHANGE,
}

_engines: "WeakKeyDictionary[Any, ValidationEngine]" = WeakKeyDictionary()


def attached_engine(form: Any) -> ValidationEngine | None:
    """Return the engine attached to a form by instant_validate(), if any."""
    return _engines.get(form)


def run_operation(engine: ValidationEngine, operation: EngineOperation, *args: Any) -> Any:
    """Run one operation on an engine that is already attached to its form."""
    if operation is EngineOperation.INITIALIZE:
        return engine.initialize(engine.form, *args)
    if operation is EngineOperation.VALIDATE:
        return engine.validate()
    if operation is EngineOperation.CLEAR:
        return engine.clear()
    if operation is EngineOperation.IS_VALID:
        return engine.is_valid()
    return engine.set_on_change(*args)


def instant_validate(form: Any, method: Any = None, *args: Any) -> Any:
    """
    Initialize or operate the engine attached to a form.

    Args:
        form: The form host
        method: Options mapping / EngineOptions / None to initialize,
                or an operation name (or EngineOperation) to dispatch
        *args: Arguments passed through to the operation

    Returns:
        Whatever the operation returns (the engine for chainable operations,
        the flag for is_valid), or False for an unknown method name or an
        operation on a form that was never initialized

    Examples:
        >>> from instant_validate.form import InMemoryForm
        >>> form = InMemoryForm.from_values({"login": ""})
        >>> engine = instant_validate(form, {"config": {"login": {"notEmpty": {}}}})
        >>> instant_validate(form, "validate").is_valid()
        False
        >>> instant_validate(form, "explode")
        False
    """
    if method is None or isinstance(method, (Mapping, EngineOptions)):
        return _attach(form).initialize(form, method)

    try:
        operation = EngineOperation.parse(method)
    except UnknownOperationError as e:
        logger.error(str(e))
        return False

    if operation is EngineOperation.INITIALIZE:
        return _attach(form).initialize(form, *args)

    engine = _engines.get(form)
    if engine is None or not engine.initialized:
        if operation is EngineOperation.IS_VALID:
            return False
        logger.error(f"Cannot call '{operation.value}' before instant_validate() initialized the form")
        return False

    return run_operation(engine, operation, *args)


def _attach(form: Any) -> ValidationEngine:
    engine = _engines.get(form)
    if engine is None:
        engine = ValidationEngine()
        _engines[form] = engine
    return engine
