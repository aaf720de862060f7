"""Shared validators package for the application.

Every validator takes a raw value of unknown type and a field label, and
either returns the normalized value or raises ``InvalidInputError``.

Available validators:
- strings.py: identifiers, free text, household names, tag lists, personal names, categories
- email.py: email address syntax and normalization
- password.py: sign-up password strength and login password presence
- numbers.py: ages
- common.py: shared steps, including the storage length bound applied by request schemas
"""

from .common import check_max_length
from .email import check_email
from .exceptions import InvalidInputError
from .numbers import check_age
from .password import check_password_login, check_password_sign_up
from .rules import GROCERY_CATEGORIES, ValidationRule
from .strings import (
    check_category,
    check_household_name,
    check_id,
    check_name,
    check_string,
    check_string_array,
)

__all__ = [
    "GROCERY_CATEGORIES",
    "InvalidInputError",
    "ValidationRule",
    "check_age",
    "check_category",
    "check_email",
    "check_household_name",
    "check_id",
    "check_max_length",
    "check_name",
    "check_password_login",
    "check_password_sign_up",
    "check_string",
    "check_string_array",
]
