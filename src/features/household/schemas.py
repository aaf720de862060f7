"""Household schemas (DTOs)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from src.features.household.models import HOUSEHOLD_NAME_MAX_LENGTH
from src.features.user.schemas import UserResponse
from src.shared.validators import check_household_name, check_max_length


# Request schemas
class HouseholdNameRequest(BaseModel):
    """Create or join a household by name."""

    model_config = ConfigDict(validate_default=True)

    name: Any = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: Any) -> str:
        name = check_household_name(value, "household name")
        return check_max_length(name, "household name", HOUSEHOLD_NAME_MAX_LENGTH)


# Response schemas
class HouseholdResponse(BaseModel):
    """Household response."""

    id: str
    name: str
    created_by: str
    created_at: datetime

    model_config = {"from_attributes": True}


class HouseholdDetailResponse(HouseholdResponse):
    """Household with its members."""

    members: list[UserResponse]
