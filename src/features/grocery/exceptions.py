"""Grocery-related exceptions."""

from fastapi import HTTPException, status


class GroceryItemNotFound(HTTPException):
    """Raised when a grocery item does not exist in the user's household."""

    def __init__(self):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail="Grocery item not found")
