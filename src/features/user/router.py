"""User router (sign-up and profile endpoints)."""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.database.dependencies import get_db_session
from src.features.auth.dependencies import get_current_active_user

from .models import User
from .schemas import PasswordChangeRequest, UserRegisterRequest, UserResponse, UserUpdateRequest
from .service import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(data: UserRegisterRequest, session: AsyncSession = Depends(get_db_session)):
    """Sign up a new user.

    - **first_name**, **last_name**: 2-25 letters, spaces or hyphens
    - **email**: valid email address (stored lowercased)
    - **password**: at least 8 characters with upper, lower, digit and one of @$!%*#?&
    - **age**: whole number between 13 and 120
    """
    user = await UserService.register_user(session, data)
    await session.commit()
    return UserResponse.model_validate(user)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_active_user)):
    """Get current user information."""
    return UserResponse.model_validate(current_user)


@router.put("/me", response_model=UserResponse)
async def update_current_user(
    data: UserUpdateRequest,
    current_user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Update current user's own profile."""
    user = await UserService.update_user(
        session,
        current_user,
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        age=data.age,
    )
    await session.commit()
    return UserResponse.model_validate(user)


@router.post("/me/change-password")
async def change_password(
    data: PasswordChangeRequest,
    current_user: User = Depends(get_current_active_user),
    session: AsyncSession = Depends(get_db_session),
):
    """Change current user's password."""
    await UserService.change_password(current_user, data.current_password, data.new_password)
    await session.commit()
    return {"message": "Password changed successfully"}
