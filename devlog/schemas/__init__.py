"""Pydantic schemas for API requests and responses."""

from devlog.schemas.analytics import TeamMember, TeamOverview, UserStats
from devlog.schemas.auth import AuthResponse, UserLogin, UserRegister, UserResponse
from devlog.schemas.entry import DeleteResponse, EntryCreate, EntryResponse, EntryUpdate
from devlog.schemas.profile import ProfileResponse, ProfileUpdate

__all__ = [
    "UserRegister",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "EntryCreate",
    "EntryUpdate",
    "EntryResponse",
    "DeleteResponse",
    "ProfileUpdate",
    "ProfileResponse",
    "UserStats",
    "TeamMember",
    "TeamOverview",
]
