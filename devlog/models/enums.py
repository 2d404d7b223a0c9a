"""Enums for model fields."""

from enum import Enum


class UserRole(str, Enum):
    """Access roles for team members."""

    ADMIN = "admin"
    MEMBER = "member"
