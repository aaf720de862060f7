"""Household dependencies for FastAPI."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.dependencies import get_db_session
from src.features.auth.dependencies import get_current_active_user
from src.features.user.models import User

from .exceptions import NotInHousehold
from .models import Household
from .service import HouseholdService


async def get_current_household(
    current_user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_db_session),
) -> Household:
    """Get the household of the current user.

    Raises:
        NotInHousehold: If the user has no household

    """
    if current_user.household_id is None:
        raise NotInHousehold()

    household = await HouseholdService.get_household(session, current_user.household_id)
    if household is None:
        raise NotInHousehold()
    return household
