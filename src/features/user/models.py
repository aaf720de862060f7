"""User domain models."""

from pwdlib import PasswordHash
from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.database.base import ID_LENGTH, Base, IdMixin, TimestampMixin

pwd_hasher = PasswordHash.recommended()


class User(Base, IdMixin, TimestampMixin):
    """A person who signs in and belongs to at most one household."""

    __tablename__ = "users"

    # Identity (email is stored lowercased and is globally unique)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    first_name: Mapped[str] = mapped_column(String(25), nullable=False)
    last_name: Mapped[str] = mapped_column(String(25), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)

    # Authentication
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)

    # Membership
    household_id: Mapped[str | None] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("households.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def verify_password(self, plain_password: str) -> bool:
        """Verify a password against the hash using Argon2.

        Salt is automatically extracted from the hash by pwdlib.
        """
        return pwd_hasher.verify(plain_password, self.hashed_password)

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash a password using Argon2.

        Salt is automatically generated and embedded in the returned hash.
        """
        return pwd_hasher.hash(password)
