"""Numeric field validators."""

import math
from typing import Any

from .exceptions import InvalidInputError
from .rules import ValidationRule


def check_age(value: Any, label: str = "age") -> int:
    """Validate an age given as a JSON number.

    Integers and integral floats (``30.0``) are accepted; strings, booleans,
    NaN, infinities and decimals are rejected.
    """
    if value is None:
        raise InvalidInputError(label, ValidationRule.REQUIRED, f"You must supply an {label}")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(label, ValidationRule.TYPE, f"{label} is not a number")
    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(label, ValidationRule.NOT_A_NUMBER, f"{label} is not a number")
        if not value.is_integer():
            raise InvalidInputError(label, ValidationRule.NOT_INTEGER, f"{label} must be a whole number")
    return int(value)
