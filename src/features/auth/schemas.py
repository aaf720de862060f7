"""Authentication schemas (DTOs)."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from src.shared.validators import check_email, check_password_login


# Request schemas
class UserLoginRequest(BaseModel):
    """Login request.

    The password is only checked for presence: strength rules applied at
    sign-up are not re-validated here.
    """

    model_config = ConfigDict(validate_default=True)

    email: Any = None
    password: Any = None

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: Any) -> str:
        return check_email(value, "email")

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: Any) -> str:
        return check_password_login(value, "password")


# Response schemas
class TokenResponse(BaseModel):
    """JWT token response."""

    access_token: str
    token_type: str = "bearer"
    expires_in: int  # seconds
