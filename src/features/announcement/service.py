"""Announcement service layer."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.features.household.models import Household
from src.features.user.models import User
from src.shared.pagination.pagination import PaginationParams
from src.shared.pagination.sqlalchemy_pagination import paginate

from .exceptions import AnnouncementNotFound, NotAnnouncementAuthor
from .models import Announcement
from .schemas import AnnouncementCreateRequest

logger = logging.getLogger(__name__)


class AnnouncementService:
    """Service for household announcements."""

    @staticmethod
    async def get_announcements_by_household_name(
        session: AsyncSession, household_name: str, pagination: PaginationParams
    ) -> tuple[list[Announcement], int]:
        """Get a household's announcements, newest first.

        Args:
            session: Database session
            household_name: Normalized household name
            pagination: PaginationParams with page and page_size

        Returns:
            Tuple of (announcements, total_count)

        """
        stmt = (
            select(Announcement)
            .join(Household, Announcement.household_id == Household.id)
            .where(Household.name == household_name)
            .order_by(Announcement.created_at.desc())
        )
        return await paginate(session, stmt, pagination)

    @staticmethod
    async def create_announcement(
        session: AsyncSession, household: Household, author: User, data: AnnouncementCreateRequest
    ) -> Announcement:
        """Post an announcement to a household."""
        announcement = Announcement(
            household_id=household.id,
            author_id=author.id,
            title=data.title,
            body=data.body,
            tags=data.tags,
        )
        session.add(announcement)
        await session.flush()
        logger.info(f"Announcement {announcement.id} posted to {household.name} by {author.email}")
        return announcement

    @staticmethod
    async def get_announcement(session: AsyncSession, household: Household, announcement_id: str) -> Announcement:
        """Get an announcement that belongs to the given household.

        Raises:
            AnnouncementNotFound: If missing or owned by another household

        """
        announcement = await session.get(Announcement, announcement_id)
        if announcement is None or announcement.household_id != household.id:
            raise AnnouncementNotFound()
        return announcement

    @staticmethod
    async def delete_announcement(
        session: AsyncSession, household: Household, user: User, announcement_id: str
    ) -> None:
        """Delete an announcement posted by the given user.

        Raises:
            AnnouncementNotFound: If missing or owned by another household
            NotAnnouncementAuthor: If the user did not post it

        """
        announcement = await AnnouncementService.get_announcement(session, household, announcement_id)
        if announcement.author_id != user.id:
            raise NotAnnouncementAuthor()

        await session.delete(announcement)
        logger.info(f"Announcement deleted: {announcement_id} by {user.email}")
