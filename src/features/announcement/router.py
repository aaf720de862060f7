"""Announcement router (household message board)."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.dependencies import get_db_session
from src.features.auth.dependencies import get_current_active_user
from src.features.household.dependencies import get_current_household
from src.features.household.models import Household
from src.features.user.models import User
from src.shared.pagination.pagination import PaginatedResponse, PaginationParams
from src.shared.validators import check_id, check_string

from .schemas import AnnouncementCreateRequest, AnnouncementResponse
from .service import AnnouncementService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/announcements", tags=["Announcements"])


@router.get("", response_model=PaginatedResponse[AnnouncementResponse])
async def list_announcements(
    pagination: PaginationParams = Depends(),
    household: Household = Depends(get_current_household),
    session: AsyncSession = Depends(get_db_session),
):
    """List the current household's announcements, newest first."""
    household_name = check_string(household.name, "household name")
    announcements, total = await AnnouncementService.get_announcements_by_household_name(
        session, household_name, pagination
    )
    return PaginatedResponse[AnnouncementResponse](
        items=[AnnouncementResponse.model_validate(a) for a in announcements],
        total=total,
        page=pagination.page,
        page_size=pagination.page_size,
    )


@router.post("", response_model=AnnouncementResponse, status_code=status.HTTP_201_CREATED)
async def create_announcement(
    data: AnnouncementCreateRequest,
    household: Household = Depends(get_current_household),
    current_user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Post an announcement.

    - **title**, **body**: non-empty text that is not just a number
    - **tags**: optional list of non-empty strings
    """
    announcement = await AnnouncementService.create_announcement(session, household, current_user, data)
    await session.commit()
    return AnnouncementResponse.model_validate(announcement)


@router.get("/{announcement_id}", response_model=AnnouncementResponse)
async def get_announcement(
    announcement_id: str,
    household: Household = Depends(get_current_household),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a single announcement from the current household."""
    announcement_id = check_id(announcement_id, "announcement id")
    announcement = await AnnouncementService.get_announcement(session, household, announcement_id)
    return AnnouncementResponse.model_validate(announcement)


@router.delete("/{announcement_id}")
async def delete_announcement(
    announcement_id: str,
    household: Household = Depends(get_current_household),
    current_user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete an announcement you posted."""
    announcement_id = check_id(announcement_id, "announcement id")
    await AnnouncementService.delete_announcement(session, household, current_user, announcement_id)
    await session.commit()
    return {"message": "Announcement deleted successfully"}
