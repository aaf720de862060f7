"""Declarative rule tables shared by the field validators.

Patterns are compiled with ``re.ASCII`` so ``\\d`` and friends never match
non-ASCII digits or letters.
"""

import re
from enum import StrEnum


class ValidationRule(StrEnum):
    """Identifiers for the rule a rejected value violated."""

    REQUIRED = "required"
    TYPE = "type"
    EMPTY = "empty"
    NUMERIC = "numeric"
    FORMAT = "format"
    LENGTH = "length"
    CONTAINS_SPACE = "contains_space"
    CHARACTERS = "characters"
    STRENGTH = "strength"
    NOT_A_NUMBER = "not_a_number"
    NOT_INTEGER = "not_integer"
    CHOICE = "choice"
    RANGE = "range"


# Identifiers: 12 bytes rendered as 24 hex characters
IDENTIFIER_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")

# Strings a number parser would accept in full (decimal, exponent, prefixed integers, Infinity)
NUMERIC_STRING_PATTERN = re.compile(
    r"^(?:[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
    r"|[+-]?Infinity"
    r"|0[xX][0-9a-fA-F]+"
    r"|0[oO][0-7]+"
    r"|0[bB][01]+)$",
    re.ASCII,
)

# Personal names
NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 25
NAME_PATTERN = re.compile(r"^[A-Za-z]+(?:[- ][A-Za-z]+)*$", re.ASCII)

# Sign-up passwords
PASSWORD_MIN_LENGTH = 8
PASSWORD_SPECIAL_CHARACTERS = "@$!%*#?&"
_special = re.escape(PASSWORD_SPECIAL_CHARACTERS)
PASSWORD_PATTERN = re.compile(
    rf"^(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9])(?=.*[{_special}])[A-Za-z0-9{_special}]{{{PASSWORD_MIN_LENGTH},}}$",
    re.ASCII,
)

# Grocery categories: words joined by single spaces or " & "
CATEGORY_PATTERN = re.compile(r"^[A-Za-z]+(?:(?: | & )[A-Za-z]+)*$", re.ASCII)

GROCERY_CATEGORIES: tuple[str, ...] = (
    "Alcoholic Beverages",
    "Baby",
    "Bakery",
    "Beverages",
    "Breakfast Foods",
    "Canned Goods",
    "Coffee & Tea",
    "Condiments & Dressing",
    "Cooking & Baking",
    "Cookies & Crackers",
    "Dairy",
    "Deli",
    "Frozen Foods",
    "Health & Personal Care",
    "Household & Cleaning",
    "Juices",
    "Meat",
    "Pasta & Grains",
    "Pet Supplies",
    "Produce",
    "Seafood",
    "Snacks",
    "Soda & Soft Drinks",
    "Spices & Seasonings",
    "Water",
    "Other",
)

CATEGORY_LOOKUP: dict[str, str] = {category.lower(): category for category in GROCERY_CATEGORIES}
