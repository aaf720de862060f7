"""Household router (create, join, leave, view)."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.dependencies import get_db_session
from src.features.auth.dependencies import get_current_active_user
from src.features.user.models import User
from src.features.user.schemas import UserResponse

from .dependencies import get_current_household
from .models import Household
from .schemas import HouseholdDetailResponse, HouseholdNameRequest, HouseholdResponse
from .service import HouseholdService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/households", tags=["Households"])


@router.post("", response_model=HouseholdResponse, status_code=status.HTTP_201_CREATED)
async def create_household(
    data: HouseholdNameRequest,
    current_user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a household and join it.

    - **name**: a single word; stored with the first letter capitalized
    """
    household = await HouseholdService.create_household(session, current_user, data.name)
    await session.commit()
    return HouseholdResponse.model_validate(household)


@router.post("/join", response_model=HouseholdResponse)
async def join_household(
    data: HouseholdNameRequest,
    current_user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Join an existing household by name (case-insensitive)."""
    household = await HouseholdService.join_household(session, current_user, data.name)
    await session.commit()
    return HouseholdResponse.model_validate(household)


@router.post("/leave")
async def leave_household(
    current_user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Leave the current household."""
    await HouseholdService.leave_household(current_user)
    await session.commit()
    return {"message": "Left household successfully"}


@router.get("/me", response_model=HouseholdDetailResponse)
async def get_my_household(
    household: Household = Depends(get_current_household),
    session: AsyncSession = Depends(get_db_session),
):
    """Get the current user's household and its members."""
    members = await HouseholdService.get_members(session, household)
    return HouseholdDetailResponse(
        id=household.id,
        name=household.name,
        created_by=household.created_by,
        created_at=household.created_at,
        members=[UserResponse.model_validate(m) for m in members],
    )
