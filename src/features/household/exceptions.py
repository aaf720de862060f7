"""Household-related exceptions."""

from fastapi import HTTPException, status


class HouseholdException(HTTPException):
    """Base household exception."""

    def __init__(self, detail: str = "Household operation failed", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class HouseholdNotFound(HouseholdException):
    """Raised when no household has the requested name."""

    def __init__(self, name: str):
        super().__init__(detail=f"Household '{name}' not found", status_code=status.HTTP_404_NOT_FOUND)


class HouseholdNameTaken(HouseholdException):
    """Raised when creating a household whose name is already used."""

    def __init__(self, name: str):
        super().__init__(detail=f"Household name '{name}' is already taken", status_code=status.HTTP_409_CONFLICT)


class AlreadyInHousehold(HouseholdException):
    """Raised when a user who already has a household tries to create or join one."""

    def __init__(self):
        super().__init__(detail="You already belong to a household")


class NotInHousehold(HouseholdException):
    """Raised when a household-scoped operation is attempted without a household."""

    def __init__(self):
        super().__init__(detail="You do not belong to a household")
