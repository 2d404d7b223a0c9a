"""Daily log entry model."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from devlog.database import Base
from devlog.models.mixins import TimestampMixin


class Entry(Base, TimestampMixin):
    """A single day's work log, owned by exactly one user."""

    __tablename__ = "entries"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)  # immutable after creation
    work_done = Column(Text, nullable=False)
    blockers = Column(Text, nullable=False)
    learnings = Column(Text, nullable=False)
    github_commit_link = Column(String(2048), nullable=True)
    date = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(UTC))

    # Relationships
    owner = relationship("User", backref="entries", lazy="joined")


# Feed ordering and per-user counts
Index("ix_entries_user_id_date", Entry.user_id, Entry.date.desc())
