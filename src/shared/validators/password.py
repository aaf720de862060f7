"""Password validation functions."""

from typing import Any

from .common import require_string
from .exceptions import InvalidInputError
from .rules import PASSWORD_MIN_LENGTH, PASSWORD_PATTERN, PASSWORD_SPECIAL_CHARACTERS, ValidationRule

PASSWORD_REQUIREMENTS = (
    f"must be at least {PASSWORD_MIN_LENGTH} characters and contain an uppercase letter, "
    f"a lowercase letter, a digit and one of {PASSWORD_SPECIAL_CHARACTERS}"
)


def check_password_sign_up(value: Any, label: str = "password") -> str:
    """Validate password strength requirements for a new password.

    Requirements:
    - At least 8 characters
    - At least one uppercase letter (A-Z)
    - At least one lowercase letter (a-z)
    - At least one digit (0-9)
    - At least one special character from ``@$!%*#?&``
    - No characters outside ASCII letters, digits and those specials

    Args:
        value: Raw password
        label: Field label used in error messages

    Returns:
        The trimmed password

    Raises:
        InvalidInputError: If the password doesn't meet strength requirements

    Examples:
        >>> check_password_sign_up("Abcdef1!")
        'Abcdef1!'
        >>> check_password_sign_up("abcdefg1")
        Traceback (most recent call last):
        ...
        src.shared.validators.exceptions.InvalidInputError: password must be at least 8 characters ...

    """
    message = f"{label} {PASSWORD_REQUIREMENTS}"
    value = require_string(value, label, missing_message=message)
    if len(value) < PASSWORD_MIN_LENGTH:
        raise InvalidInputError(label, ValidationRule.LENGTH, message)
    if not PASSWORD_PATTERN.match(value):
        raise InvalidInputError(label, ValidationRule.STRENGTH, message)
    return value


def check_password_login(value: Any, label: str = "password") -> str:
    """Validate a password supplied at login.

    Only presence is checked; strength was enforced when the password was set.
    """
    return require_string(value, label, missing_message=f"You must supply a {label}")
