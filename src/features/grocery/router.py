"""Grocery list router."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.dependencies import get_db_session
from src.features.auth.dependencies import get_current_active_user
from src.features.household.dependencies import get_current_household
from src.features.household.models import Household
from src.features.user.models import User
from src.shared.validators import GROCERY_CATEGORIES, check_category, check_id

from .schemas import GroceryItemCreateRequest, GroceryItemResponse, GroceryListResponse
from .service import GroceryService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/groceries", tags=["Groceries"])


@router.get("/categories", response_model=list[str])
async def list_categories():
    """List the categories grocery items can be filed under."""
    return list(GROCERY_CATEGORIES)


@router.get("", response_model=GroceryListResponse)
async def list_items(
    category: str | None = None,
    household: Household = Depends(get_current_household),
    session: AsyncSession = Depends(get_db_session),
):
    """List the household grocery list, optionally filtered by category."""
    if category is not None:
        category = check_category(category, "category")
    items = await GroceryService.get_items(session, household, category)
    return GroceryListResponse(items=[GroceryItemResponse.model_validate(i) for i in items], total=len(items))


@router.post("", response_model=GroceryItemResponse, status_code=status.HTTP_201_CREATED)
async def add_item(
    data: GroceryItemCreateRequest,
    household: Household = Depends(get_current_household),
    current_user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Add an item to the grocery list."""
    item = await GroceryService.add_item(session, household, current_user, data)
    await session.commit()
    return GroceryItemResponse.model_validate(item)


@router.post("/{item_id}/purchased", response_model=GroceryItemResponse)
async def toggle_purchased(
    item_id: str,
    household: Household = Depends(get_current_household),
    session: AsyncSession = Depends(get_db_session),
):
    """Mark an item purchased, or unmark it."""
    item = await GroceryService.toggle_purchased(session, household, check_id(item_id, "item id"))
    await session.commit()
    return GroceryItemResponse.model_validate(item)


@router.delete("/{item_id}")
async def delete_item(
    item_id: str,
    household: Household = Depends(get_current_household),
    session: AsyncSession = Depends(get_db_session),
):
    """Remove an item from the grocery list."""
    await GroceryService.delete_item(session, household, check_id(item_id, "item id"))
    await session.commit()
    return {"message": "Grocery item deleted successfully"}
