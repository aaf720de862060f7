"""Authentication dependencies for FastAPI."""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jwt.exceptions import InvalidTokenError
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.dependencies import get_db_session
from src.features.user.models import User
from src.features.user.service import UserService

from .exceptions import InvalidTokenException
from .jwt_utils import decode_token, verify_token_type

security = HTTPBearer()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    session: AsyncSession = Depends(get_db_session),
) -> User:
    """Get the current authenticated user from JWT token.

    Args:
        credentials: HTTP authorization credentials with bearer token
        session: Database session

    Returns:
        User object

    Raises:
        InvalidTokenException: If token is invalid or user not found

    """
    try:
        payload = decode_token(credentials.credentials)

        if not verify_token_type(payload, "access"):
            raise InvalidTokenException(detail="Invalid token type")

        user_id = payload.get("sub")
        if not isinstance(user_id, str):
            raise InvalidTokenException(detail="Invalid token payload")

    except InvalidTokenError as err:
        raise InvalidTokenException() from err

    user = await UserService.get_user(session, user_id)
    if user is None:
        raise InvalidTokenException(detail="User not found")

    return user


async def get_current_active_user(current_user: User = Depends(get_current_user)) -> User:
    """Get current active user (convenience wrapper)."""
    return current_user
