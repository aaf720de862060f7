"""Tests for the tag list and age validators."""

import math

import pytest

from src.shared.validators import InvalidInputError, ValidationRule, check_age, check_string_array


class TestCheckStringArray:
    """Tests for check_string_array()"""

    def test_empty_list_is_accepted(self):
        assert check_string_array([], "tags") == []

    def test_elements_are_trimmed(self):
        assert check_string_array([" chores ", "dinner"], "tags") == ["chores", "dinner"]

    def test_tuple_is_accepted(self):
        assert check_string_array(("a", "b"), "tags") == ["a", "b"]

    def test_input_is_not_modified(self):
        tags = ["  a  ", "b "]
        check_string_array(tags, "tags")
        assert tags == ["  a  ", "b "]

    def test_blank_element_fails(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_string_array(["a", "  "], "tags")
        assert exc_info.value.rule == ValidationRule.EMPTY

    def test_non_string_element_fails(self):
        with pytest.raises(InvalidInputError, match="tags"):
            check_string_array(["a", 3], "tags")

    @pytest.mark.parametrize("value", ["chores", {"a": "b"}, 5, b"ab"])
    def test_non_list_fails(self, value):
        with pytest.raises(InvalidInputError) as exc_info:
            check_string_array(value, "tags")
        assert exc_info.value.rule == ValidationRule.TYPE

    def test_missing_fails(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_string_array(None, "tags")
        assert exc_info.value.rule == ValidationRule.REQUIRED

    def test_idempotent(self):
        once = check_string_array([" x ", "y"], "tags")
        assert check_string_array(once, "tags") == once


class TestCheckAge:
    """Tests for check_age()"""

    @pytest.mark.parametrize("value", [0, 1, 30, 120, -4])
    def test_integers_are_accepted(self, value):
        assert check_age(value) == value

    def test_integral_float_is_accepted_as_int(self):
        result = check_age(30.0)
        assert result == 30
        assert isinstance(result, int)

    def test_decimal_fails(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_age(4.5)
        assert exc_info.value.rule == ValidationRule.NOT_INTEGER

    def test_numeric_string_fails(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_age("4")
        assert exc_info.value.rule == ValidationRule.TYPE

    def test_nan_fails(self):
        with pytest.raises(InvalidInputError) as exc_info:
            check_age(math.nan)
        assert exc_info.value.rule == ValidationRule.NOT_A_NUMBER

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinity_fails(self, value):
        with pytest.raises(InvalidInputError):
            check_age(value)

    @pytest.mark.parametrize("value", [True, False])
    def test_booleans_fail(self, value):
        with pytest.raises(InvalidInputError) as exc_info:
            check_age(value)
        assert exc_info.value.rule == ValidationRule.TYPE

    def test_missing_fails(self):
        with pytest.raises(InvalidInputError, match="You must supply an age"):
            check_age(None)

    def test_idempotent(self):
        assert check_age(check_age(42.0)) == 42
