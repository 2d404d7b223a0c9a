"""User model."""

from sqlalchemy import Column, Integer, String

from devlog.database import Base
from devlog.models.enums import UserRole
from devlog.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """User model for authentication and entry ownership."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)  # stored normalized
    password_hash = Column(String(255), nullable=False)
    team = Column(String(255), nullable=False, default="")
    role = Column(String(20), nullable=False, default=UserRole.MEMBER.value)  # 'admin' | 'member'
