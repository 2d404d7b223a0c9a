"""Read-only usage statistics."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from devlog.config import get_settings
from devlog.models.entry import Entry
from devlog.schemas.analytics import TeamMember, TeamOverview, UserStats
from devlog.services.users import UserService

settings = get_settings()


class AnalyticsService:
    """Counts and listings derived from entries and users."""

    def __init__(self, db: Session):
        self.db = db

    def user_stats(self, user_id: int) -> UserStats:
        total = self.db.query(func.count(Entry.id)).filter(Entry.user_id == user_id).scalar()
        return UserStats(total_entries=total or 0)

    def team_overview(self) -> TeamOverview:
        """Up to `team_overview_limit` known users. Not filtered by team."""
        users = UserService(self.db).list_all(limit=settings.team_overview_limit)
        return TeamOverview(members=[TeamMember.model_validate(user) for user in users])
