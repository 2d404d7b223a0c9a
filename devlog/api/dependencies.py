"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from devlog.database import get_db
from devlog.errors import NotFoundError, UnauthorizedError
from devlog.models.user import User
from devlog.services.analytics import AnalyticsService
from devlog.services.auth import verify_access_token
from devlog.services.entries import EntryService
from devlog.services.users import UserService

security = HTTPBearer(auto_error=False)


def resolve_user(db: Session, token: str | None) -> User:
    """Verify a token and load the live user it names.

    Every failure surfaces as the same UnauthorizedError.
    """
    if not token:
        raise UnauthorizedError()

    payload = verify_access_token(token)
    try:
        return UserService(db).find_by_id(payload.user_id)
    except NotFoundError as e:
        raise UnauthorizedError() from e


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    x_auth_token: Annotated[str | None, Header()] = None,
) -> User:
    """Get the current authenticated user from a Bearer or x-auth-token header."""
    token = credentials.credentials if credentials else x_auth_token
    return resolve_user(db, token)


def get_user_service(
    db: Annotated[Session, Depends(get_db)],
) -> UserService:
    """Get user service instance."""
    return UserService(db)


def get_entry_service(
    db: Annotated[Session, Depends(get_db)],
) -> EntryService:
    """Get entry service instance."""
    return EntryService(db)


def get_analytics_service(
    db: Annotated[Session, Depends(get_db)],
) -> AnalyticsService:
    """Get analytics service instance."""
    return AnalyticsService(db)
