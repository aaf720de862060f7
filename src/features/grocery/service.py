"""Grocery list service layer."""

import logging
from datetime import UTC, datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.features.household.models import Household
from src.features.user.models import User

from .exceptions import GroceryItemNotFound
from .models import GroceryItem
from .schemas import GroceryItemCreateRequest

logger = logging.getLogger(__name__)


class GroceryService:
    """Service for the shared grocery list."""

    @staticmethod
    async def get_items(session: AsyncSession, household: Household, category: str | None = None) -> list[GroceryItem]:
        """List a household's items: unpurchased first, then by category and name."""
        stmt = select(GroceryItem).where(GroceryItem.household_id == household.id)
        if category is not None:
            stmt = stmt.where(GroceryItem.category == category)
        stmt = stmt.order_by(GroceryItem.purchased, GroceryItem.category, GroceryItem.name)

        result = await session.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def add_item(
        session: AsyncSession, household: Household, user: User, data: GroceryItemCreateRequest
    ) -> GroceryItem:
        """Add an item to a household's list."""
        item = GroceryItem(
            household_id=household.id,
            added_by=user.id,
            name=data.name,
            category=data.category,
            purchased=False,
        )
        session.add(item)
        await session.flush()
        logger.info(f"Grocery item added to {household.name}: {item.name} ({item.category})")
        return item

    @staticmethod
    async def get_item(session: AsyncSession, household: Household, item_id: str) -> GroceryItem:
        """Get an item that belongs to the given household.

        Raises:
            GroceryItemNotFound: If missing or owned by another household

        """
        item = await session.get(GroceryItem, item_id)
        if item is None or item.household_id != household.id:
            raise GroceryItemNotFound()
        return item

    @staticmethod
    async def toggle_purchased(session: AsyncSession, household: Household, item_id: str) -> GroceryItem:
        """Flip an item's purchased flag."""
        item = await GroceryService.get_item(session, household, item_id)
        item.purchased = not item.purchased
        item.updated_at = datetime.now(UTC)
        return item

    @staticmethod
    async def delete_item(session: AsyncSession, household: Household, item_id: str) -> None:
        """Remove an item from the list."""
        item = await GroceryService.get_item(session, household, item_id)
        await session.delete(item)
        logger.info(f"Grocery item deleted from {household.name}: {item_id}")
