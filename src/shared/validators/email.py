"""Email address validation."""

from typing import Any

from email_validator import EmailNotValidError, validate_email

from .common import require_string
from .exceptions import InvalidInputError
from .rules import ValidationRule


def check_email(value: Any, label: str = "email") -> str:
    """Validate an email address and normalize it to lowercase.

    Syntax is checked with the email-validator library (the same library
    behind pydantic's ``EmailStr``). No DNS lookup is performed.

    Examples:
        >>> check_email(" USER@Example.com ")
        'user@example.com'

    """
    value = require_string(value, label, missing_message=f"You must supply an {label}")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise InvalidInputError(label, ValidationRule.FORMAT, f"{value} is an invalid {label}") from exc
    return value.lower()
