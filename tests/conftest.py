"""
Pytest configuration and fixtures for instant-validate tests

This module provides shared fixtures for unit and integration tests.
"""
import logging

import pytest

from instant_validate.core.rules import ValidationEngine
from instant_validate.form import InMemoryField, InMemoryForm
from instant_validate.observability.logger import DEFAULT_LOGGER_NAME


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that exercise a single module"
    )
    config.addinivalue_line(
        "markers", "integration: Tests that drive the engine through a form host or the CLI"
    )


# =======================
# FORM FIXTURES
# =======================

@pytest.fixture
def signup_form() -> InMemoryForm:
    """
    A signup form with every field filled in validly.

    Returns:
        InMemoryForm with login, password, confirm_password and age fields
    """
    return InMemoryForm([
        InMemoryField("login", "alice"),
        InMemoryField("password", "s3cret"),
        InMemoryField("confirm_password", "s3cret"),
        InMemoryField("age", "30"),
    ])


@pytest.fixture
def signup_config(signup_form):
    """
    Rule configuration for the signup form.

    The password confirmation rule reads the password field of the
    fixture form, as a custom rule would read a sibling input.
    """
    def check_password_match(field_name, value, rule_config):
        password = signup_form.find_field("password").value()
        return "Passwords should match" if value != password else True

    return {
        "login": {
            "notEmpty": {"message": "Username is required and cannot be empty"},
            "length": {"min": 3, "message": "Value should be at least 3 symbols"},
        },
        "password": {
            "notEmpty": {"message": "Password is required and cannot be empty"},
        },
        "confirm_password": {
            "notEmpty": {"message": "You must enter a password confirmation"},
            "checkPasswordMatch": check_password_match,
        },
        "age": {
            "interval": {"min": 18, "max": 99},
        },
    }


@pytest.fixture
def engine() -> ValidationEngine:
    """A fresh, unattached validation engine."""
    return ValidationEngine()


# =======================
# LOGGING FIXTURES
# =======================

@pytest.fixture
def package_log(caplog):
    """
    Capture records of the package logger.

    The package logger does not propagate to the root logger, so the
    caplog handler is attached to it directly.
    """
    package_logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    package_logger.addHandler(caplog.handler)
    try:
        yield caplog
    finally:
        package_logger.removeHandler(caplog.handler)
