"""
Validation engine orchestrating rules over the fields of an attached form.

The engine walks the configuration field by field and rule by rule,
collects failure messages into an error report, renders them through the
form host and keeps the validity flag of the last pass.
"""

from typing import Any, Callable, Mapping

from instant_validate.core.exceptions import EngineNotInitializedError
from instant_validate.core.models import (
    EngineOptions,
    ErrorEntry,
    ErrorReport,
    RuleConfig,
    ValidationResult,
)
from instant_validate.core.validators import (
    BaseRule,
    RuleRegistry,
    call_inline,
    default_registry,
    interpret_result,
)
from instant_validate.form.protocols import ChangeCallback, FieldHandle, FormHost
from instant_validate.observability.logger import get_logger
from instant_validate.observability.metrics import (
    record_rule_failure,
    record_skipped_rule,
    record_validation,
    track_duration,
    validation_duration_seconds,
)

logger = get_logger(__name__)


def is_inline_rule(rule_config: Any) -> bool:
    """A field rule given as a function rather than as parameters."""
    return callable(rule_config) and not isinstance(rule_config, (Mapping, RuleConfig))


class ValidationEngine:
    """
    Validates the fields of one form against a rule configuration.

    Each engine owns its options, its copy of the rule registry and the
    result of its last validation pass; nothing is shared between engines.

    Usage:
        engine = ValidationEngine().initialize(form, {
            "config": {
                "login": {"notEmpty": {"message": "Username is required"}},
            },
        })
        engine.validate()
        if not engine.is_valid():
            print(engine.result().errors)
    """

    def __init__(self, registry: RuleRegistry | None = None):
        """
        Initialize an unattached engine.

        Args:
            registry: Rules available to this engine (built-ins by default);
                      the engine keeps its own copy
        """
        self.registry = (registry or default_registry()).copy()
        self.form: FormHost | None = None
        self.options = EngineOptions()
        self._valid = False
        self._errors: ErrorReport = {}
        self._rules_checked = 0
        self._rules_skipped = 0
        self._dispatching: list[FieldHandle] = []

    def initialize(
        self,
        form: FormHost,
        options: EngineOptions | Mapping[str, Any] | None = None,
    ) -> "ValidationEngine":
        """
        Attach the engine to a form and apply options.

        Options not given by the caller take their defaults; calling
        initialize again replaces the previous configuration entirely,
        including the ``on_change`` callback. Fields are subscribed once to
        a dispatcher that forwards events to the current ``on_change``.

        Args:
            form: The form host the engine validates
            options: EngineOptions or a mapping with ``config``,
                     ``defaultErrorMessage``, ``getField`` and ``onChange``

        Returns:
            The engine, for chaining
        """
        if form is not self.form:
            self._dispatching = []
        self.form = form
        self.options = EngineOptions.from_raw(options)
        self._valid = False
        self._errors = {}
        self._rules_checked = 0
        self._rules_skipped = 0

        logger.info(
            "Engine initialized",
            extra={"fields": self.options.field_names, "on_change": self.options.on_change is not None},
        )

        if self.options.on_change is not None:
            self._wire_dispatcher()
        return self

    @property
    def initialized(self) -> bool:
        return self.form is not None

    def register_rule(self, name: str, rule: BaseRule | Callable[..., Any]) -> "ValidationEngine":
        """Register a rule on this engine's registry only."""
        self.registry.register(name, rule)
        return self

    def validate(self) -> "ValidationEngine":
        """
        Run one full validation pass.

        Previously rendered errors are cleared first. Every configured rule
        of every configured field is evaluated, in configuration order; the
        messages of failed rules are collected per field and rendered.
        A field the accessor cannot resolve is validated as an empty value
        and its errors are reported but not rendered.

        If a rule raises, the flag and report of the previous pass are
        restored before the exception propagates.

        Returns:
            The engine, for chaining

        Raises:
            EngineNotInitializedError: If the engine is not attached to a form
        """
        self._require_form("validate")
        previous = (self._valid, self._errors)
        self._valid = False
        self._errors = {}
        self.clear()

        errors: ErrorReport = {}
        self._rules_checked = 0
        self._rules_skipped = 0

        try:
            with track_duration(validation_duration_seconds):
                for field_name, field_rules in self.options.config.items():
                    field = self._get_field(field_name)
                    if field is None:
                        logger.warning(f"Field '{field_name}' not found, validating it as empty")
                    value = self._read_value(field)

                    for rule_name, rule_config in field_rules.items():
                        message = self._evaluate(field_name, value, rule_name, rule_config)
                        if message is None:
                            continue

                        record_rule_failure(rule_name)
                        if field_name not in errors:
                            errors[field_name] = ErrorEntry(field=field)
                        errors[field_name].add(message)
        except Exception:
            self._valid, self._errors = previous
            raise

        self._errors = errors
        record_validation(not errors)

        if not errors:
            self._valid = True
            logger.debug("Validation passed", extra={"rules_checked": self._rules_checked})
            return self

        self._valid = False
        logger.debug(
            "Validation failed",
            extra={"failed_fields": list(errors), "rules_checked": self._rules_checked},
        )

        for entry in errors.values():
            if entry.field is not None:
                self.form.render_errors(entry.field, list(entry.messages))

        return self

    def clear(self) -> "ValidationEngine":
        """
        Remove rendered errors and errored markers from the form.

        The validity flag and the last error report are left untouched.

        Raises:
            EngineNotInitializedError: If the engine is not attached to a form
        """
        self._require_form("clear")
        self.form.clear_errors()
        return self

    def is_valid(self) -> bool:
        """Validity flag of the last validate() call; False before the first one."""
        return self._valid

    def set_on_change(self, callback: ChangeCallback) -> "ValidationEngine":
        """
        Subscribe a callback to user edits of every configured field.

        Fields the accessor cannot resolve are skipped.

        Raises:
            EngineNotInitializedError: If the engine is not attached to a form
        """
        self._require_form("set_on_change")

        for field_name in self.options.field_names:
            field = self._get_field(field_name)
            if field is None:
                logger.debug(f"Field '{field_name}' not found, change callback not wired")
                continue
            field.on_user_input(callback)
        return self

    def _wire_dispatcher(self) -> None:
        for field_name in self.options.field_names:
            field = self._get_field(field_name)
            if field is None or any(field is wired for wired in self._dispatching):
                continue
            field.on_user_input(self._dispatch_change)
            self._dispatching.append(field)

    def _dispatch_change(self, event: Any) -> Any:
        if self.options.on_change is None:
            return None
        return self.options.on_change(event)

    @property
    def errors(self) -> ErrorReport:
        """Copy of the error report of the last validate() call."""
        return {
            name: ErrorEntry(field=entry.field, messages=list(entry.messages))
            for name, entry in self._errors.items()
        }

    def result(self) -> ValidationResult:
        """Snapshot of the last validate() call, detached from the field handles."""
        return ValidationResult(
            valid=self._valid,
            errors={name: list(entry.messages) for name, entry in self._errors.items()},
            fields_checked=len(self.options.config) if self.initialized else 0,
            rules_checked=self._rules_checked,
            rules_skipped=self._rules_skipped,
        )

    def _evaluate(self, field_name: str, value: str, rule_name: str, rule_config: Any) -> str | None:
        """
        Evaluate one rule against one value.

        Returns:
            None if the rule passed or does not exist, otherwise the failure message
        """
        default_message = self.options.default_error_message

        if is_inline_rule(rule_config):
            self._rules_checked += 1
            return interpret_result(call_inline(rule_config, field_name, value), default_message)

        rule = self.registry.get(rule_name)
        if rule is None:
            # Unknown rule names are ignored so configs can name rules registered later
            logger.debug(f"Unknown rule '{rule_name}' on field '{field_name}' skipped")
            record_skipped_rule(rule_name)
            self._rules_skipped += 1
            return None

        self._rules_checked += 1
        config = RuleConfig.from_raw(rule_config)
        fallback_message = config.message or default_message

        if isinstance(rule, BaseRule):
            return None if rule(field_name, value, config) else fallback_message
        return interpret_result(rule(field_name, value, config), fallback_message)

    def _get_field(self, field_name: str) -> FieldHandle | None:
        if self.options.get_field is not None:
            return self.options.get_field(field_name)
        return self.form.find_field(field_name)

    @staticmethod
    def _read_value(field: FieldHandle | None) -> str:
        if field is None:
            return ""
        value = field.value()
        return "" if value is None else str(value)

    def _require_form(self, operation: str) -> None:
        if self.form is None:
            raise EngineNotInitializedError(operation)

    def __repr__(self) -> str:
        return f"ValidationEngine(fields={self.options.field_names}, valid={self._valid})"
