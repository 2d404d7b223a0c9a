"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from devlog.database import get_db
from devlog.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from devlog.services.auth import login_user, register_user

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    token, user = register_user(db, user_data.name, user_data.email, user_data.password)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
):
    """Login with email and password."""
    token, user = login_user(db, credentials.email, credentials.password)
    return AuthResponse(token=token, user=UserResponse.model_validate(user))
