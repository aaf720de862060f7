"""Announcement domain models."""

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.database.base import ID_LENGTH, Base, IdMixin, TimestampMixin

TITLE_MAX_LENGTH = 200


class Announcement(Base, IdMixin, TimestampMixin):
    """A message posted to every member of a household."""

    __tablename__ = "announcements"

    household_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("households.id", ondelete="CASCADE"), nullable=False, index=True
    )
    author_id: Mapped[str] = mapped_column(String(ID_LENGTH), ForeignKey("users.id"), nullable=False)

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
