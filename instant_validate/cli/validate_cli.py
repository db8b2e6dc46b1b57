"""
Command-line interface for validating field values against a rule file.

Usage:
    instant-validate validate --rules <rules.yaml> --values <values.json> [options]
    instant-validate list-rules
"""

import argparse
import json
import re
import sys
from pathlib import Path
from typing import Any

import yaml

from instant_validate.core.exceptions import RuleConfigError
from instant_validate.core.rules import RuleConfigLoader, ValidationEngine
from instant_validate.core.validators import default_registry
from instant_validate.form import InMemoryForm
from instant_validate.observability.logger import get_logger, log_operation, setup_logger
from instant_validate.observability.metrics import generate_metrics

logger = get_logger(__name__)

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def load_values(path: Path) -> dict[str, Any]:
    """
    Load field values from a JSON or YAML file.

    Args:
        path: File holding a mapping of field name -> value

    Returns:
        The mapping

    Raises:
        ValueError: If the file does not hold a mapping
    """
    with open(path) as f:
        if path.suffix.lower() == ".json":
            values = json.load(f)
        else:
            values = yaml.safe_load(f)

    if not isinstance(values, dict):
        raise ValueError(f"Values file {path} must contain a mapping of field names to values")
    return values


def format_report(engine: ValidationEngine, output: str) -> str:
    """Render the last validation result as text or JSON."""
    result = engine.result()

    if output == "json":
        return result.model_dump_json(indent=2)

    lines = []
    if result.valid:
        lines.append(f"VALID ({result.fields_checked} fields, {result.rules_checked} rules checked)")
    else:
        lines.append(f"INVALID ({len(result.errors)} of {result.fields_checked} fields failed)")
        for field_name, messages in result.errors.items():
            lines.append(f"  {field_name}:")
            for message in messages:
                lines.append(f"    - {message}")
    if result.rules_skipped:
        lines.append(f"  ({result.rules_skipped} unknown rules skipped)")
    return "\n".join(lines)


def validate_command(args) -> int:
    """
    Execute the validate command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    rules_path = Path(args.rules)
    values_path = Path(args.values)

    try:
        options = RuleConfigLoader(rules_path).load()
        values = load_values(values_path)
    except FileNotFoundError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except (RuleConfigError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid input: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if args.default_message:
        options["default_error_message"] = args.default_message

    form = InMemoryForm.from_values(values)
    engine = ValidationEngine().initialize(form, options)

    try:
        with log_operation("Validating values", logger=logger, rules_file=str(rules_path)):
            engine.validate()
    except (re.error, ValueError) as e:
        # Rule parameters are only read when the rules run
        logger.error(f"Invalid rule parameters: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE

    print(format_report(engine, args.output))
    if args.show_metrics:
        print(generate_metrics().decode("utf-8"))

    return EXIT_VALID if engine.is_valid() else EXIT_INVALID


def list_rules_command(args) -> int:
    """Print the names of the built-in rules."""
    for name in default_registry().names():
        print(name)
    return EXIT_VALID


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="instant-validate",
        description="Validate form field values against declarative rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a JSON values file
  instant-validate validate --rules config/signup.yaml --values data/signup.json

  # Machine-readable report
  instant-validate validate --rules config/signup.yaml --values data/signup.yaml --output json

  # Show available rule names
  instant-validate list-rules
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL env var or WARNING)"
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: LOG_FORMAT env var or json)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser = subparsers.add_parser("validate", help="Validate a values file")
    validate_parser.add_argument(
        "--rules",
        required=True,
        help="Path to the YAML rule file"
    )
    validate_parser.add_argument(
        "--values",
        required=True,
        help="Path to a JSON or YAML file mapping field names to values"
    )
    validate_parser.add_argument(
        "--output",
        default="text",
        choices=["text", "json"],
        help="Report format (default: text)"
    )
    validate_parser.add_argument(
        "--default-message",
        default=None,
        help="Override the default error message"
    )
    validate_parser.add_argument(
        "--show-metrics",
        action="store_true",
        help="Print Prometheus metrics after the report"
    )

    subparsers.add_parser("list-rules", help="List built-in rule names")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level or args.log_format:
        setup_logger(level=args.log_level, format_type=args.log_format)

    if args.command == "validate":
        return validate_command(args)
    if args.command == "list-rules":
        return list_rules_command(args)

    parser.print_help()
    return EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
