"""
Integration tests for validation driven by field change events.
"""

import pytest

from instant_validate.core.rules import ValidationEngine, instant_validate
from instant_validate.form import InMemoryForm

pytestmark = pytest.mark.integration


class TestLiveValidation:
    """The engine re-validates as the user edits fields"""

    def test_on_change_revalidates_while_typing(self, signup_form, signup_config):
        engine = ValidationEngine()
        engine.initialize(signup_form, {
            "config": signup_config,
            "onChange": lambda event: engine.validate(),
        })
        login = signup_form.find_field("login")

        login.type_text("")
        assert engine.is_valid() is False
        assert signup_form.error_blocks["login"] == (
            '<div class="iv-error-container"><ul>'
            "<li>Username is required and cannot be empty</li>"
            "<li>Value should be at least 3 symbols</li>"
            "</ul></div>"
        )

        login.type_text("al")
        assert signup_form.error_blocks["login"] == (
            '<div class="iv-error-container">Value should be at least 3 symbols</div>'
        )

        login.type_text("alice")
        login.commit()
        assert engine.is_valid() is True
        assert signup_form.error_blocks == {}

    def test_password_confirmation(self, signup_form, signup_config):
        instant_validate(signup_form, {"config": signup_config})
        instant_validate(signup_form, "setOnChange", lambda event: instant_validate(signup_form, "validate"))

        signup_form.find_field("confirm_password").set_value("different")

        assert instant_validate(signup_form, "isValid") is False
        assert signup_form.error_blocks == {
            "confirm_password": '<div class="iv-error-container">Passwords should match</div>',
        }

        signup_form.find_field("confirm_password").set_value("s3cret")

        assert instant_validate(signup_form, "isValid") is True

    def test_fields_outside_config_do_not_trigger(self):
        form = InMemoryForm.from_values({"login": "", "comment": ""})
        calls = []
        ValidationEngine().initialize(form, {
            "config": {"login": {"notEmpty": {}}},
            "onChange": calls.append,
        })

        form.find_field("comment").set_value("hello")
        assert calls == []

        form.find_field("login").set_value("bob")
        assert len(calls) == 2
