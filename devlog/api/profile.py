"""Profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from devlog.api.dependencies import get_current_user, get_user_service
from devlog.models.user import User
from devlog.schemas.profile import ProfileResponse, ProfileUpdate
from devlog.services.users import UserService

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.get("/me", response_model=ProfileResponse)
async def get_profile(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the current user's profile."""
    return current_user


@router.put("", response_model=ProfileResponse)
async def update_profile(
    profile_data: ProfileUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Update name, email, or team of the current user."""
    return users.update(current_user.id, profile_data.model_dump(exclude_unset=True))
