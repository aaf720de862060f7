"""Pagination utilities and models for API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field

T = TypeVar("T")


class PaginationParams(BaseModel):
    """Query parameters for pagination.

    Can be used as dependency in FastAPI routes:
    ```python
    @router.get("/items")
    async def list_items(pagination: PaginationParams = Depends()):
        items, total = await paginate(session, stmt, pagination)
    ```
    """

    page: int | None = Field(default=1, ge=1, description="Page number (1-indexed). Set to None to disable pagination")

    page_size: int | None = Field(
        default=20, ge=1, le=100, description="Items per page. Set to None to disable pagination"
    )

    @property
    def skip(self) -> int:
        """Calculate skip/offset for database query."""
        if self.page is None or self.page_size is None:
            return 0
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int | None:
        """Calculate limit for database query (None = no limit)."""
        return self.page_size

    @property
    def is_paginated(self) -> bool:
        """Check if pagination is enabled."""
        return self.page is not None and self.page_size is not None


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic paginated response model."""

    items: list[T]
    total: int
    page: int | None = None
    page_size: int | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_pages(self) -> int | None:
        """Calculate total pages. Returns None if not paginated."""
        if self.page is None or self.page_size is None:
            return None
        return (self.total + self.page_size - 1) // self.page_size

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        """Check if there's a next page."""
        total_pages = self.total_pages
        if total_pages is None or self.page is None:
            return False
        return self.page < total_pages


__all__ = ["PaginatedResponse", "PaginationParams"]
