"""Entry service: CRUD over daily log entries with author-only mutation."""

import logging
from datetime import UTC, datetime

from sqlalchemy.orm import Session

from devlog.errors import ForbiddenError, NotFoundError
from devlog.models.entry import Entry
from devlog.schemas.entry import EntryCreate, EntryResponse, EntryUpdate

logger = logging.getLogger(__name__)

NOT_OWNER = "You do not own this entry"


class EntryService:
    """Service for entry operations.

    Reads are team-wide: any authenticated user may list the feed or fetch a
    single entry. Update and delete are restricted to the entry's owner.
    """

    def __init__(self, db: Session):
        self.db = db

    def create(self, data: EntryCreate, user_id: int) -> EntryResponse:
        entry = Entry(
            user_id=user_id,
            work_done=data.work_done,
            blockers=data.blockers,
            learnings=data.learnings,
            github_commit_link=data.github_commit_link,
            date=data.date or datetime.now(UTC),
        )
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        logger.info(f"User {user_id} created entry {entry.id}")
        return self._to_response(entry)

    def list_all(self) -> list[EntryResponse]:
        """All entries, newest date first; equal dates keep insertion order."""
        entries = self.db.query(Entry).order_by(Entry.date.desc(), Entry.id.asc()).all()
        return [self._to_response(entry) for entry in entries]

    def find_one(self, entry_id: int, user_id: int) -> EntryResponse:
        """Fetch one entry.

        `user_id` is accepted for symmetry with update/remove but not checked:
        single-entry reads are team-wide, like the feed.
        """
        return self._to_response(self._get_or_404(entry_id))

    def update(self, entry_id: int, data: EntryUpdate, user_id: int) -> EntryResponse:
        entry = self._get_or_404(entry_id)
        self._assert_owner(entry, user_id)

        for key, value in data.model_dump(exclude_unset=True).items():
            setattr(entry, key, value)

        self.db.commit()
        self.db.refresh(entry)
        return self._to_response(entry)

    def remove(self, entry_id: int, user_id: int) -> dict:
        entry = self._get_or_404(entry_id)
        self._assert_owner(entry, user_id)

        self.db.delete(entry)
        self.db.commit()
        logger.info(f"User {user_id} deleted entry {entry_id}")
        return {"message": "Entry deleted successfully"}

    def _get_or_404(self, entry_id: int) -> Entry:
        entry = self.db.query(Entry).filter(Entry.id == entry_id).first()
        if entry is None:
            raise NotFoundError("Entry", entry_id)
        return entry

    def _assert_owner(self, entry: Entry, user_id: int) -> None:
        if entry.user_id != user_id:
            logger.warning(f"User {user_id} denied mutation of entry {entry.id}")
            raise ForbiddenError(NOT_OWNER)

    @staticmethod
    def _to_response(entry: Entry) -> EntryResponse:
        response = EntryResponse.model_validate(entry)
        response.user_name = entry.owner.name if entry.owner else ""
        return response
