"""Steps shared by the string-typed validators."""

from typing import Any

from .exceptions import InvalidInputError
from .rules import NUMERIC_STRING_PATTERN, ValidationRule


def require_string(value: Any, label: str, missing_message: str | None = None) -> str:
    """Ensure a value is present and a non-blank string, and return it trimmed.

    Args:
        value: Raw input value
        label: Field label used in error messages
        missing_message: Message used when the value is missing or blank

    Returns:
        The trimmed string

    Raises:
        InvalidInputError: If the value is missing, not a string, or blank

    """
    if value is None:
        raise InvalidInputError(label, ValidationRule.REQUIRED, missing_message or f"You must supply a {label}")
    if not isinstance(value, str):
        raise InvalidInputError(label, ValidationRule.TYPE, f"{label} must be a string")
    value = value.strip()
    if not value:
        raise InvalidInputError(
            label, ValidationRule.EMPTY, missing_message or f"{label} cannot be an empty string or just spaces"
        )
    return value


def is_numeric_string(value: str) -> bool:
    """Check whether an already-trimmed string parses entirely as a number."""
    return NUMERIC_STRING_PATTERN.match(value) is not None


def reject_numeric(value: str, label: str) -> None:
    """Raise if a trimmed string is purely numeric."""
    if is_numeric_string(value):
        raise InvalidInputError(
            label,
            ValidationRule.NUMERIC,
            f"{value} is not a valid value for {label} as it only contains digits",
        )


def capitalize_first(value: str) -> str:
    """Title-case the first character and lower-case the rest.

    ``str.capitalize`` title-cases rather than upper-cases, so characters that
    expand (``"ß"`` to ``"Ss"``) give a result that is stable when re-applied.
    """
    return value.capitalize()


def check_max_length(value: str, label: str, max_length: int) -> str:
    """Reject an already-validated string longer than its storage column.

    Raises:
        InvalidInputError: If the value has more than ``max_length`` characters

    """
    if len(value) > max_length:
        raise InvalidInputError(label, ValidationRule.LENGTH, f"{label} must be at most {max_length} characters")
    return value
