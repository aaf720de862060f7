"""Authentication router (JWT login endpoint)."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.dependencies import get_db_session

from .exceptions import InvalidCredentialsException
from .schemas import TokenResponse, UserLoginRequest
from .service import AuthService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=TokenResponse)
async def login(data: UserLoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Login and get a JWT access token.

    - **email**: Email address (case-insensitive)
    - **password**: Password
    """
    user = await AuthService.authenticate_user(session, data.email, data.password)

    if not user:
        raise InvalidCredentialsException()

    logger.info(f"User logged in: {user.email}")
    return AuthService.create_token(user)
