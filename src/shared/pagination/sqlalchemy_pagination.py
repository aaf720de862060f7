"""SQLAlchemy query helpers for pagination."""

from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from .pagination import PaginationParams


async def paginate(session: AsyncSession, stmt: Select[Any], pagination: PaginationParams) -> tuple[list[Any], int]:
    """Paginate a single-entity select statement.

    Args:
        session: Database session
        stmt: Select statement with filters and ordering already applied
        pagination: PaginationParams with page and page_size

    Returns:
        Tuple of (items, total_count)

    Example:
        ```python
        stmt = select(Announcement).where(Announcement.household_id == household.id)
        items, total = await paginate(session, stmt, pagination)
        ```

    """
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await session.execute(count_stmt)).scalar_one()

    if pagination.is_paginated:
        stmt = stmt.offset(pagination.skip).limit(pagination.limit)

    result = await session.execute(stmt)
    return list(result.scalars().all()), total


__all__ = ["paginate"]
