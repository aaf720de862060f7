"""Authentication service layer."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.settings import settings
from src.features.user.models import User
from src.features.user.service import UserService

from .jwt_utils import create_access_token
from .schemas import TokenResponse

logger = logging.getLogger(__name__)


class AuthService:
    """Service for JWT authentication."""

    @staticmethod
    async def authenticate_user(session: AsyncSession, email: str, password: str) -> User | None:
        """Authenticate a user by normalized email and password.

        Returns:
            User object if authentication successful, None otherwise

        """
        user = await UserService.get_user_by_email(session, email)

        if not user:
            logger.warning(f"Login attempt for unknown email: {email}")
            return None

        if not user.verify_password(password):
            logger.warning(f"Failed login attempt for: {email}")
            return None

        return user

    @staticmethod
    def create_token(user: User) -> TokenResponse:
        """Create an access token for a user."""
        access_token = create_access_token({"sub": user.id, "email": user.email})
        return TokenResponse(access_token=access_token, expires_in=settings.access_token_expire_minutes * 60)
