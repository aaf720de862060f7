"""Tests for check_email()"""

import pytest

from src.shared.validators import InvalidInputError, ValidationRule, check_email


def test_email_is_trimmed_and_lowercased():
    assert check_email(" USER@Example.com ") == "user@example.com"


@pytest.mark.parametrize("value", ["not-an-email", "user@", "@example.com", "user@@example.com", "a b@example.com"])
def test_invalid_email_fails(value):
    with pytest.raises(InvalidInputError) as exc_info:
        check_email(value)
    assert exc_info.value.rule == ValidationRule.FORMAT
    assert exc_info.value.field == "email"


def test_plus_addressing_is_accepted():
    assert check_email("Jane.Doe+home@Example.org") == "jane.doe+home@example.org"


def test_missing_email_message():
    with pytest.raises(InvalidInputError, match="You must supply an email"):
        check_email(None)


def test_idempotent():
    once = check_email("  Mixed.Case@Example.COM")
    assert check_email(once) == once


def test_error_serializes_for_response_body():
    with pytest.raises(InvalidInputError) as exc_info:
        check_email("nope", "contact email")
    assert exc_info.value.to_dict() == {
        "detail": "nope is an invalid contact email",
        "field": "contact email",
        "rule": "format",
    }
