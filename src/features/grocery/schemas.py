"""Grocery list schemas (DTOs)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from src.features.grocery.models import ITEM_NAME_MAX_LENGTH
from src.shared.validators import check_category, check_max_length, check_string


# Request schemas
class GroceryItemCreateRequest(BaseModel):
    """Add an item to the household grocery list."""

    model_config = ConfigDict(validate_default=True)

    name: Any = None
    category: Any = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: Any) -> str:
        return check_max_length(check_string(value, "item name"), "item name", ITEM_NAME_MAX_LENGTH)

    @field_validator("category")
    @classmethod
    def validate_category(cls, value: Any) -> str:
        return check_category(value, "category")


# Response schemas
class GroceryItemResponse(BaseModel):
    """Grocery item response."""

    id: str
    household_id: str
    added_by: str
    name: str
    category: str
    purchased: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class GroceryListResponse(BaseModel):
    """Grocery list response."""

    items: list[GroceryItemResponse]
    total: int
