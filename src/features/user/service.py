"""User service layer."""

import logging
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .exceptions import EmailAlreadyExists, IncorrectPassword
from .models import User
from .schemas import UserRegisterRequest

logger = logging.getLogger(__name__)


class UserService:
    """Service for user operations."""

    @staticmethod
    async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
        """Get user by normalized email."""
        stmt = select(User).where(User.email == email)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def register_user(session: AsyncSession, data: UserRegisterRequest) -> User:
        """Register a new user.

        New users start without a household; they create or join one afterwards.

        Args:
            session: Database session
            data: Validated sign-up data

        Returns:
            Created User object

        Raises:
            EmailAlreadyExists: If email already exists

        """
        if await UserService.get_user_by_email(session, data.email):
            raise EmailAlreadyExists()

        # Hash password (salt handled automatically by pwdlib using Argon2)
        user = User(
            email=data.email,
            first_name=data.first_name,
            last_name=data.last_name,
            age=data.age,
            hashed_password=User.hash_password(data.password),
            household_id=None,
        )

        session.add(user)
        await session.flush()
        logger.info(f"New user registered: {user.email} ({user.id})")

        return user

    @staticmethod
    async def get_user(session: AsyncSession, user_id: str) -> User | None:
        """Get user by ID."""
        return await session.get(User, user_id)

    @staticmethod
    async def update_user(session: AsyncSession, user: User, **kwargs) -> User:
        """Update profile fields (first_name, last_name, email, age).

        Args:
            session: Database session
            user: User to update
            **kwargs: Fields to update; None values are ignored

        Returns:
            Updated User object

        Raises:
            EmailAlreadyExists: If email is being changed to an existing email

        """
        new_email = kwargs.get("email")
        if new_email is not None and new_email != user.email:
            if await UserService.get_user_by_email(session, new_email):
                raise EmailAlreadyExists()

        for key, value in kwargs.items():
            if value is not None and key in ("first_name", "last_name", "email", "age"):
                setattr(user, key, value)

        user.updated_at = datetime.now(UTC)
        logger.info(f"User updated: {user.email}")
        return user

    @staticmethod
    async def change_password(user: User, current_password: str, new_password: str) -> bool:
        """Change user password.

        Raises:
            IncorrectPassword: If current password is incorrect

        """
        if not user.verify_password(current_password):
            raise IncorrectPassword()

        user.hashed_password = User.hash_password(new_password)
        user.updated_at = datetime.now(UTC)

        logger.info(f"Password changed for user: {user.email}")
        return True
