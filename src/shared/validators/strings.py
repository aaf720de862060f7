"""Validators for identifiers, free text, names, tags and categories."""

from collections.abc import Sequence
from typing import Any

from .common import capitalize_first, reject_numeric, require_string
from .exceptions import InvalidInputError
from .rules import (
    CATEGORY_LOOKUP,
    CATEGORY_PATTERN,
    IDENTIFIER_PATTERN,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NAME_PATTERN,
    ValidationRule,
)


def check_id(value: Any, label: str = "id") -> str:
    """Validate a 24-hex-character record identifier.

    Args:
        value: Raw identifier
        label: Field label used in error messages

    Returns:
        The trimmed identifier

    Raises:
        InvalidInputError: If the value is missing, blank, not a string,
            or not 24 hexadecimal characters

    Examples:
        >>> check_id(" 65a1f0c2e4b0a1b2c3d4e5f6 ")
        '65a1f0c2e4b0a1b2c3d4e5f6'

    """
    value = require_string(value, label)
    if not IDENTIFIER_PATTERN.match(value):
        raise InvalidInputError(label, ValidationRule.FORMAT, f"{label} is not a valid identifier")
    return value


def check_string(value: Any, label: str) -> str:
    """Validate free text, rejecting blank and purely numeric values."""
    value = require_string(value, label)
    reject_numeric(value, label)
    return value


def check_household_name(value: Any, label: str = "household name") -> str:
    """Validate a household name and normalize its casing.

    Household names are single tokens: no spaces allowed. The stored form
    has the first letter upper-cased and the rest lower-cased, so it can be
    used as a lookup key.

    Examples:
        >>> check_household_name("smiths")
        'Smiths'

    """
    value = check_string(value, label)
    if " " in value:
        raise InvalidInputError(label, ValidationRule.CONTAINS_SPACE, f"{label} cannot contain spaces")
    return capitalize_first(value)


def check_string_array(value: Any, label: str) -> list[str]:
    """Validate a list of strings such as tags.

    An empty list is accepted. Every element must be a string that is not
    blank once trimmed. A new list of trimmed elements is returned; the
    input is never modified.
    """
    if value is None:
        raise InvalidInputError(label, ValidationRule.REQUIRED, f"You must provide an array of {label}")
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise InvalidInputError(label, ValidationRule.TYPE, f"You must provide an array of {label}")

    result: list[str] = []
    for element in value:
        if not isinstance(element, str) or not element.strip():
            raise InvalidInputError(
                label,
                ValidationRule.EMPTY,
                f"One or more elements in {label} is not a string or is an empty string",
            )
        result.append(element.strip())
    return result


def check_name(value: Any, label: str) -> str:
    """Validate a personal name (first or last name).

    Names are 2 to 25 characters of letters, with single spaces or hyphens
    between words. The result is capitalized: ``"john-paul"`` becomes
    ``"John-paul"``.
    """
    value = require_string(value, label)
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        raise InvalidInputError(
            label, ValidationRule.LENGTH, f"{label} must be between {NAME_MIN_LENGTH}-{NAME_MAX_LENGTH} characters"
        )
    reject_numeric(value, label)
    if not NAME_PATTERN.match(value):
        raise InvalidInputError(
            label, ValidationRule.CHARACTERS, f"{label} cannot contain numbers or special characters"
        )
    return capitalize_first(value)


def check_category(value: Any, label: str = "category") -> str:
    """Validate a grocery category against the fixed category list.

    Matching is case-insensitive and the canonical label is returned, e.g.
    ``"coffee & tea"`` becomes ``"Coffee & Tea"``.
    """
    value = require_string(value, label)
    if not CATEGORY_PATTERN.match(value):
        raise InvalidInputError(
            label, ValidationRule.CHARACTERS, f"{label} can only contain letters, spaces and '&'"
        )
    category = CATEGORY_LOOKUP.get(value.lower())
    if category is None:
        raise InvalidInputError(label, ValidationRule.CHOICE, f"{label} must be one of the listed categories")
    return category
