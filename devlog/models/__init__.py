"""SQLAlchemy models."""

from devlog.models.entry import Entry
from devlog.models.user import User

__all__ = [
    "User",
    "Entry",
]
