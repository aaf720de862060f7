"""Household domain models."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.database.base import ID_LENGTH, Base, IdMixin, TimestampMixin

HOUSEHOLD_NAME_MAX_LENGTH = 100


class Household(Base, IdMixin, TimestampMixin):
    """A named group of users sharing announcements and a grocery list.

    ``name`` holds the normalized household name (``"Smiths"``) and is the
    key users join by.
    """

    __tablename__ = "households"

    name: Mapped[str] = mapped_column(String(HOUSEHOLD_NAME_MAX_LENGTH), nullable=False, unique=True, index=True)
    created_by: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False)
