"""Announcement-related exceptions."""

from fastapi import HTTPException, status


class AnnouncementException(HTTPException):
    """Base announcement exception."""

    def __init__(self, detail: str = "Announcement operation failed", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class AnnouncementNotFound(AnnouncementException):
    """Raised when an announcement does not exist in the user's household."""

    def __init__(self):
        super().__init__(detail="Announcement not found", status_code=status.HTTP_404_NOT_FOUND)


class NotAnnouncementAuthor(AnnouncementException):
    """Raised when a user tries to delete someone else's announcement."""

    def __init__(self):
        super().__init__(
            detail="Only the author can delete this announcement", status_code=status.HTTP_403_FORBIDDEN
        )
