"""Household service layer."""

import logging
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.features.user.models import User

from .exceptions import AlreadyInHousehold, HouseholdNameTaken, HouseholdNotFound, NotInHousehold
from .models import Household

logger = logging.getLogger(__name__)


class HouseholdService:
    """Service for household membership."""

    @staticmethod
    async def get_by_name(session: AsyncSession, name: str) -> Household | None:
        """Get a household by its normalized name."""
        stmt = select(Household).where(Household.name == name)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_household(session: AsyncSession, household_id: str) -> Household | None:
        """Get household by ID."""
        return await session.get(Household, household_id)

    @staticmethod
    async def create_household(session: AsyncSession, user: User, name: str) -> Household:
        """Create a household and make its creator the first member.

        Args:
            session: Database session
            user: The creating user
            name: Normalized household name

        Raises:
            AlreadyInHousehold: If the user already has a household
            HouseholdNameTaken: If the name is in use

        """
        if user.household_id is not None:
            raise AlreadyInHousehold()
        if await HouseholdService.get_by_name(session, name):
            raise HouseholdNameTaken(name)

        household = Household(name=name, created_by=user.id)
        session.add(household)
        await session.flush()

        user.household_id = household.id
        user.updated_at = datetime.now(UTC)
        logger.info(f"Household created: {household.name} by {user.email}")
        return household

    @staticmethod
    async def join_household(session: AsyncSession, user: User, name: str) -> Household:
        """Add a user to an existing household.

        Raises:
            AlreadyInHousehold: If the user already has a household
            HouseholdNotFound: If no household has this name

        """
        if user.household_id is not None:
            raise AlreadyInHousehold()

        household = await HouseholdService.get_by_name(session, name)
        if household is None:
            raise HouseholdNotFound(name)

        user.household_id = household.id
        user.updated_at = datetime.now(UTC)
        logger.info(f"User {user.email} joined household {household.name}")
        return household

    @staticmethod
    async def leave_household(user: User) -> None:
        """Remove a user from their household.

        Raises:
            NotInHousehold: If the user has no household

        """
        if user.household_id is None:
            raise NotInHousehold()

        logger.info(f"User {user.email} left household {user.household_id}")
        user.household_id = None
        user.updated_at = datetime.now(UTC)

    @staticmethod
    async def get_members(session: AsyncSession, household: Household) -> list[User]:
        """List the members of a household ordered by first name."""
        stmt = select(User).where(User.household_id == household.id).order_by(User.first_name, User.last_name)
        result = await session.execute(stmt)
        return list(result.scalars().all())
