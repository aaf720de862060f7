"""SQLAlchemy base models and utilities."""

import os
import time
from datetime import UTC, datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

ID_LENGTH = 24


def generate_id() -> str:
    """Generate a 24-hex-character record identifier.

    Layout: 4-byte big-endian creation timestamp followed by 8 random bytes,
    so identifiers sort roughly by creation time.
    """
    return int(time.time()).to_bytes(4, "big").hex() + os.urandom(8).hex()


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class IdMixin:
    """Mixin for a string primary key holding a 24-hex-character identifier."""

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, default=generate_id)


class TimestampMixin:
    """Mixin for adding created_at and updated_at timestamp columns."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
        server_default=func.now(),
    )
