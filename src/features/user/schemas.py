"""User schemas (DTOs).

Request fields are declared as ``Any`` so pydantic never coerces the raw
payload; the shared validators do all checking and normalization.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from src.shared.validators import (
    InvalidInputError,
    ValidationRule,
    check_age,
    check_email,
    check_name,
    check_password_login,
    check_password_sign_up,
)

MIN_AGE = 13
MAX_AGE = 120


def _label(info: ValidationInfo) -> str:
    return (info.field_name or "value").replace("_", " ")


def check_sign_up_age(value: Any, label: str = "age") -> int:
    """Validate an age and enforce the sign-up age range."""
    age = check_age(value, label)
    if not MIN_AGE <= age <= MAX_AGE:
        raise InvalidInputError(label, ValidationRule.RANGE, f"{label} must be between {MIN_AGE} and {MAX_AGE}")
    return age


# Request schemas
class UserRegisterRequest(BaseModel):
    """User sign-up request."""

    model_config = ConfigDict(validate_default=True)

    first_name: Any = None
    last_name: Any = None
    email: Any = None
    password: Any = None
    age: Any = None

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_names(cls, value: Any, info: ValidationInfo) -> str:
        return check_name(value, _label(info))

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: Any, info: ValidationInfo) -> str:
        return check_email(value, _label(info))

    @field_validator("password")
    @classmethod
    def password_strength(cls, value: Any, info: ValidationInfo) -> str:
        """Validate password strength using shared validator."""
        return check_password_sign_up(value, _label(info))

    @field_validator("age")
    @classmethod
    def validate_age(cls, value: Any, info: ValidationInfo) -> int:
        return check_sign_up_age(value, _label(info))


class UserUpdateRequest(BaseModel):
    """Profile update request. Omitted or null fields are left unchanged."""

    first_name: Any = None
    last_name: Any = None
    email: Any = None
    age: Any = None

    @field_validator("first_name", "last_name")
    @classmethod
    def validate_names(cls, value: Any, info: ValidationInfo) -> str | None:
        return None if value is None else check_name(value, _label(info))

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: Any, info: ValidationInfo) -> str | None:
        return None if value is None else check_email(value, _label(info))

    @field_validator("age")
    @classmethod
    def validate_age(cls, value: Any, info: ValidationInfo) -> int | None:
        return None if value is None else check_sign_up_age(value, _label(info))


class PasswordChangeRequest(BaseModel):
    """Password change request."""

    model_config = ConfigDict(validate_default=True)

    current_password: Any = None
    new_password: Any = None
    confirm_new_password: Any = None

    @field_validator("current_password")
    @classmethod
    def validate_current_password(cls, value: Any, info: ValidationInfo) -> str:
        return check_password_login(value, _label(info))

    @field_validator("new_password")
    @classmethod
    def password_strength(cls, value: Any, info: ValidationInfo) -> str:
        """Validate password strength using shared validator."""
        return check_password_sign_up(value, _label(info))

    @field_validator("confirm_new_password")
    @classmethod
    def passwords_match(cls, value: Any, info: ValidationInfo) -> str:
        """Validate that new_password and confirm_new_password match."""
        label = _label(info)
        value = check_password_login(value, label)
        if "new_password" in info.data and value != info.data["new_password"]:
            raise InvalidInputError(label, ValidationRule.FORMAT, "New passwords do not match")
        return value


# Response schemas
class UserResponse(BaseModel):
    """User response."""

    id: str
    email: str
    first_name: str
    last_name: str
    age: int
    household_id: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
