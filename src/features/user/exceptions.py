"""User-related exceptions."""

from fastapi import HTTPException, status


class UserException(HTTPException):
    """Base user exception."""

    def __init__(self, detail: str = "User operation failed", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class EmailAlreadyExists(UserException):
    """Raised when an email address is already registered."""

    def __init__(self):
        super().__init__(detail="Email already registered", status_code=status.HTTP_409_CONFLICT)


class IncorrectPassword(UserException):
    """Raised when password is incorrect."""

    def __init__(self):
        super().__init__(detail="Current password is incorrect")
