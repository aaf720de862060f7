"""Grocery list domain models."""

from sqlalchemy import Boolean, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.database.base import ID_LENGTH, Base, IdMixin, TimestampMixin

ITEM_NAME_MAX_LENGTH = 100


class GroceryItem(Base, IdMixin, TimestampMixin):
    """An entry on a household's shared grocery list."""

    __tablename__ = "grocery_items"

    household_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("households.id", ondelete="CASCADE"), nullable=False, index=True
    )
    added_by: Mapped[str] = mapped_column(String(ID_LENGTH), ForeignKey("users.id"), nullable=False)

    name: Mapped[str] = mapped_column(String(ITEM_NAME_MAX_LENGTH), nullable=False)
    category: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    purchased: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
