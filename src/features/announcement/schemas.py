"""Announcement schemas (DTOs)."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.features.announcement.models import TITLE_MAX_LENGTH
from src.shared.validators import check_max_length, check_string, check_string_array


# Request schemas
class AnnouncementCreateRequest(BaseModel):
    """Post an announcement to the current household."""

    model_config = ConfigDict(validate_default=True)

    title: Any = None
    body: Any = None
    tags: Any = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def validate_title(cls, value: Any) -> str:
        return check_max_length(check_string(value, "title"), "title", TITLE_MAX_LENGTH)

    @field_validator("body")
    @classmethod
    def validate_body(cls, value: Any) -> str:
        return check_string(value, "body")

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, value: Any) -> list[str]:
        return check_string_array(value, "tags")


# Response schemas
class AnnouncementResponse(BaseModel):
    """Announcement response."""

    id: str
    household_id: str
    author_id: str
    title: str
    body: str
    tags: list[str]
    created_at: datetime

    model_config = {"from_attributes": True}
