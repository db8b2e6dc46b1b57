"""
Unit tests for the built-in rules, custom rule handling and the rule registry.

Includes property-based testing with hypothesis for rule semantics.
"""

import re

import pytest
from hypothesis import given
from hypothesis import strategies as st

from instant_validate.core.exceptions import RuleRegistrationError
from instant_validate.core.models import RuleConfig
from instant_validate.core.validators import (
    BUILTIN_RULES,
    CompareRule,
    CustomRule,
    IntervalRule,
    LengthRule,
    NotEmptyRule,
    RegexRule,
    RuleRegistry,
    call_inline,
    default_registry,
    interpret_result,
)


class TestNotEmptyRule:
    """Tests for NotEmptyRule"""

    def test_empty_value_fails(self):
        assert NotEmptyRule()("login", "", {}) is False

    def test_single_character_passes(self):
        assert NotEmptyRule()("login", "a", {}) is True

    def test_whitespace_counts_as_content(self):
        """Test that whitespace is not stripped before the check"""
        assert NotEmptyRule()("login", "   ", {}) is True

    @given(st.text(min_size=1))
    def test_property_any_non_empty_text_passes(self, value):
        assert NotEmptyRule()("field", value, None) is True


class TestLengthRule:
    """Tests for LengthRule"""

    def test_below_min_fails(self):
        assert LengthRule()("login", "ab", {"min": 3}) is False

    def test_at_min_passes(self):
        assert LengthRule()("login", "abc", {"min": 3}) is True

    def test_defaults_accept_anything(self):
        """Test min defaults to 0 and max to unbounded"""
        assert LengthRule()("login", "", {}) is True
        assert LengthRule()("login", "x" * 1000, {}) is True

    def test_max_bound_is_inclusive(self):
        config = {"min": 2, "max": 4}
        assert LengthRule()("login", "abcd", config) is True
        assert LengthRule()("login", "abcde", config) is False
        assert LengthRule()("login", "a", config) is False

    def test_max_without_min(self):
        """Test that max applies even when min is not set"""
        assert LengthRule()("code", "abcdef", {"max": 5}) is False
        assert LengthRule()("code", "", {"max": 5}) is True

    def test_numeric_strings_are_accepted_as_bounds(self):
        assert LengthRule()("login", "ab", {"min": "3"}) is False

    @given(st.text(max_size=10))
    def test_property_within_bounds_pass(self, value):
        assert LengthRule()("field", value, {"min": 0, "max": 10}) is True

    @given(st.text(min_size=11, max_size=50))
    def test_property_above_max_fail(self, value):
        assert LengthRule()("field", value, {"min": 1, "max": 10}) is False


class TestIntervalRule:
    """Tests for IntervalRule"""

    def test_value_within_interval(self):
        assert IntervalRule()("age", "3", {"min": 1, "max": 5}) is True

    def test_non_numeric_is_zero(self):
        """Test that a value without a numeric prefix is read as 0"""
        assert IntervalRule()("age", "abc", {"min": 1, "max": 5}) is False
        assert IntervalRule()("age", "abc", {}) is True

    def test_max_without_min(self):
        assert IntervalRule()("qty", "6", {"max": 5}) is False
        assert IntervalRule()("qty", "5", {"max": 5}) is True

    def test_bounds_are_inclusive(self):
        config = {"min": 1, "max": 5}
        assert IntervalRule()("age", "1", config) is True
        assert IntervalRule()("age", "5", config) is True
        assert IntervalRule()("age", "5.01", config) is False

    def test_numeric_prefix_is_used(self):
        assert IntervalRule()("weight", "42kg", {"min": 40, "max": 50}) is True

    def test_only_min(self):
        assert IntervalRule()("amount", "-1", {}) is False
        assert IntervalRule()("amount", "1000000", {"min": 10}) is True

    @given(st.floats(min_value=0, max_value=100, allow_nan=False, allow_infinity=False))
    def test_property_values_in_range_pass(self, value):
        assert IntervalRule()("field", repr(value), {"min": 0, "max": 100}) is True

    @given(st.floats(max_value=-0.01, allow_nan=False, allow_infinity=False))
    def test_property_negative_values_fail(self, value):
        assert IntervalRule()("field", repr(value), {}) is False


class TestRegexRule:
    """Tests for RegexRule"""

    def test_valid_pattern_match(self):
        assert RegexRule()("code", "123", {"pattern": r"^\d+$"}) is True

    def test_invalid_pattern_match(self):
        assert RegexRule()("code", "12a", {"pattern": r"^\d+$"}) is False

    def test_unanchored_pattern_matches_anywhere(self):
        assert RegexRule()("email", "mail: user@example.com", {"pattern": "@"}) is True

    def test_empty_pattern_matches_everything(self):
        assert RegexRule()("anything", "", {}) is True
        assert RegexRule()("anything", "whatever", {"pattern": ""}) is True

    def test_compiled_pattern_and_flags(self):
        config = RuleConfig(pattern=re.compile("^abc$"), flags=int(re.IGNORECASE))
        assert RegexRule()("code", "ABC", config) is True


class TestCompareRule:
    """Tests for CompareRule"""

    def test_greater_or_equal(self):
        config = {"operator": ">=", "etalon": 10}
        assert CompareRule()("qty", "10", config) is True
        assert CompareRule()("qty", "9", config) is False

    @pytest.mark.parametrize("operator,value,expected", [
        ("=", "5", True),
        ("=", "6", False),
        ("===", "5", True),
        ("<=", "5", True),
        ("<", "5", False),
        (">", "6", True),
        ("!=", "5", False),
        ("!=", "4", True),
    ])
    def test_operators(self, operator, value, expected):
        assert CompareRule()("qty", value, {"operator": operator, "etalon": 5}) is expected

    def test_defaults_compare_equal_to_zero(self):
        assert CompareRule()("qty", "0", {}) is True
        assert CompareRule()("qty", "1", {}) is False

    def test_unknown_operator_falls_back_to_equality(self):
        config = {"operator": "<>", "etalon": 5}
        assert CompareRule()("qty", "5", config) is True
        assert CompareRule()("qty", "4", config) is False

    def test_non_numeric_value_fails_except_not_equal(self):
        assert CompareRule()("qty", "abc", {"operator": ">=", "etalon": -100}) is False
        assert CompareRule()("qty", "abc", {"operator": "!=", "etalon": 5}) is True

    def test_string_etalon_is_coerced(self):
        assert CompareRule()("qty", "7", {"operator": "=", "etalon": "7"}) is True


class TestCustomRules:
    """Tests for custom rule result handling"""

    def test_interpret_true_passes(self):
        assert interpret_result(True, "default") is None

    def test_interpret_truthy_non_string_passes(self):
        assert interpret_result(1, "default") is None

    def test_interpret_string_is_the_message(self):
        assert interpret_result("too short", "default") == "too short"

    @pytest.mark.parametrize("result", [False, None, 0, ""])
    def test_interpret_falsy_uses_default(self, result):
        assert interpret_result(result, "default") == "default"

    def test_inline_rule_receives_itself_as_config(self):
        seen = {}

        def rule(field_name, value, config):
            seen["args"] = (field_name, value, config)
            return True

        call_inline(rule, "login", "bob")
        assert seen["args"] == ("login", "bob", rule)

    def test_custom_rule_receives_rule_config(self):
        rule = CustomRule("even", lambda name, value, config: config.max)
        assert rule("num", "2", {"max": 4}) == 4.0
        assert rule.rule_name == "even"


class TestRuleRegistry:
    """Tests for RuleRegistry"""

    def test_default_registry_has_builtins(self):
        registry = default_registry()
        assert registry.names() == ["notEmpty", "length", "interval", "regex", "compare"]
        assert all(registry.is_builtin(name) for name in registry)
        assert len(BUILTIN_RULES) == len(registry)

    def test_unknown_name_returns_none(self):
        assert default_registry().get("doesNotExist") is None
        assert "doesNotExist" not in default_registry()

    def test_register_plain_function(self):
        registry = default_registry()
        registry.register("isEven", lambda name, value, config: int(value) % 2 == 0)

        assert "isEven" in registry
        assert isinstance(registry.get("isEven"), CustomRule)
        assert registry.is_builtin("isEven") is False

    def test_register_returns_registry_for_chaining(self):
        registry = RuleRegistry().register("a", NotEmptyRule()).register("b", LengthRule())
        assert registry.names() == ["a", "b"]

    def test_register_replaces_existing_rule(self):
        registry = default_registry()
        registry.register("notEmpty", lambda name, value, config: value.strip() != "")
        assert isinstance(registry.get("notEmpty"), CustomRule)

    def test_register_rejects_non_callable(self):
        with pytest.raises(RuleRegistrationError):
            default_registry().register("broken", "not a function")

    def test_register_rejects_empty_name(self):
        with pytest.raises(RuleRegistrationError):
            default_registry().register("", NotEmptyRule())

    def test_unregister(self):
        registry = default_registry()
        registry.unregister("regex")
        registry.unregister("neverRegistered")
        assert "regex" not in registry

    def test_copy_is_independent(self):
        original = default_registry()
        copy = original.copy()
        copy.register("extra", lambda name, value, config: True)

        assert "extra" in copy
        assert "extra" not in original
