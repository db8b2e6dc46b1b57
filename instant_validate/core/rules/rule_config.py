"""
Rule configuration management.

Loads field validation configurations from YAML files and provides a
builder for assembling them in code.
"""

from pathlib import Path
from typing import Any, Callable

import yaml

from instant_validate.core.exceptions import RuleConfigError


class RuleConfigLoader:
    """
    Loads engine options from YAML configuration files.

    Expected YAML format:
    ```yaml
    default_error_message: "Invalid value"
    rules:
      login:
        notEmpty:
          message: "Username is required and cannot be empty"
        length:
          min: 3
          message: "Value should be at least 3 symbols"

      age:
        interval:
          min: 18
          max: 99
    ```

    Rule names are kept in file order. Functions cannot be written in YAML;
    custom rules are referenced by the name they are registered under.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the rule config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Rule configuration file not found: {config_path}")

    def load(self) -> dict[str, Any]:
        """
        Load the file as an options mapping accepted by ValidationEngine.initialize().

        Returns:
            Mapping with ``config`` and, when present, ``default_error_message``

        Raises:
            RuleConfigError: If the YAML is invalid or has no usable 'rules' section
        """
        try:
            with open(self.config_path) as f:
                document = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise RuleConfigError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(document, dict) or "rules" not in document:
            raise RuleConfigError("Configuration file must contain 'rules' section")

        options: dict[str, Any] = {"config": self._parse_rules(document["rules"])}

        default_message = document.get("default_error_message", document.get("defaultErrorMessage"))
        if default_message is not None:
            options["default_error_message"] = str(default_message)

        return options

    def load_rules(self) -> dict[str, dict[str, Any]]:
        """Load only the field -> rules mapping."""
        return self.load()["config"]

    def _parse_rules(self, rules: Any) -> dict[str, dict[str, Any]]:
        """
        Check the shape of the 'rules' section.

        Only the nesting is checked; rule parameters are read leniently
        when the rules run.
        """
        if not isinstance(rules, dict):
            raise RuleConfigError("'rules' section must map field names to rules")

        config: dict[str, dict[str, Any]] = {}
        for field_name, field_rules in rules.items():
            if field_rules is None:
                field_rules = {}
            if not isinstance(field_rules, dict):
                raise RuleConfigError(f"Rules for field '{field_name}' must be a mapping of rule names")
            config[str(field_name)] = {
                str(rule_name): rule_config if rule_config is not None else {}
                for rule_name, rule_config in field_rules.items()
            }
        return config


class RuleConfigBuilder:
    """
    Programmatically build a field validation configuration.

    Usage:
        config = RuleConfigBuilder() \\
            .not_empty("login", message="Username is required") \\
            .length("login", min_length=3) \\
            .build()
    """

    def __init__(self):
        """Initialize empty configuration."""
        self.config: dict[str, dict[str, Any]] = {}

    def add_rule(self, field_name: str, rule_name: str, rule_config: Any = None) -> "RuleConfigBuilder":
        """Add any rule by name, with a parameter mapping or an inline function."""
        field_rules = self.config.setdefault(field_name, {})
        field_rules[rule_name] = {} if rule_config is None else rule_config
        return self

    def not_empty(self, field_name: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add a notEmpty rule."""
        return self.add_rule(field_name, "notEmpty", _params(message=message))

    def length(
        self,
        field_name: str,
        min_length: int | None = None,
        max_length: int | None = None,
        message: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add a length rule."""
        return self.add_rule(field_name, "length", _params(min=min_length, max=max_length, message=message))

    def interval(
        self,
        field_name: str,
        min_value: float | None = None,
        max_value: float | None = None,
        message: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add an interval rule."""
        return self.add_rule(field_name, "interval", _params(min=min_value, max=max_value, message=message))

    def regex(self, field_name: str, pattern: str, message: str | None = None) -> "RuleConfigBuilder":
        """Add a regex rule."""
        return self.add_rule(field_name, "regex", _params(pattern=pattern, message=message))

    def compare(
        self,
        field_name: str,
        operator: str = "=",
        etalon: float = 0,
        message: str | None = None,
    ) -> "RuleConfigBuilder":
        """Add a compare rule."""
        return self.add_rule(
            field_name, "compare", _params(operator=operator, etalon=etalon, message=message)
        )

    def custom(
        self,
        field_name: str,
        rule_name: str,
        func: Callable[[str, str, Any], Any],
    ) -> "RuleConfigBuilder":
        """Add an inline custom rule function under a descriptive name."""
        return self.add_rule(field_name, rule_name, func)

    def build(self) -> dict[str, dict[str, Any]]:
        """Build and return the configuration."""
        return self.config


def _params(**params: Any) -> dict[str, Any]:
    return {key: value for key, value in params.items() if value is not None}
