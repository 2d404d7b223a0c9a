"""User persistence: the credential store behind auth, profile, and analytics."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from devlog.errors import ConflictError, NotFoundError
from devlog.models.enums import UserRole
from devlog.models.user import User
from devlog.services.auth import get_password_hash, verify_password

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email is already registered"
PROFILE_FIELDS = ("name", "email", "team")


def normalize_email(email: str) -> str:
    """Lowercase and trim an email for storage and lookup."""
    return email.strip().lower()


class UserService:
    """Service for user records. Only this class touches password hashes."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, name: str, email: str, password: str) -> User:
        email = normalize_email(email)
        if self._email_taken(email):
            raise ConflictError(EMAIL_TAKEN)

        user = User(
            name=name,
            email=email,
            password_hash=get_password_hash(password),
            team="",
            role=UserRole.MEMBER.value,
        )
        self.db.add(user)
        self._commit_unique()
        self.db.refresh(user)
        return user

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == normalize_email(email)).first()

    def find_by_id(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def update(self, user_id: int, fields: dict) -> User:
        """Apply a profile patch. Keys outside name/email/team are ignored."""
        user = self.find_by_id(user_id)

        changes = {key: value for key, value in fields.items() if key in PROFILE_FIELDS}
        if "email" in changes:
            changes["email"] = normalize_email(changes["email"])
            if changes["email"] != user.email and self._email_taken(changes["email"]):
                raise ConflictError(EMAIL_TAKEN)

        for key, value in changes.items():
            setattr(user, key, value)

        self._commit_unique()
        self.db.refresh(user)
        return user

    def list_all(self, limit: int) -> list[User]:
        return self.db.query(User).order_by(User.id).limit(limit).all()

    def verify_password(self, plain_password: str, password_hash: str) -> bool:
        return verify_password(plain_password, password_hash)

    def _email_taken(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def _commit_unique(self) -> None:
        # A concurrent writer can claim the email between the check and the commit
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Lost email uniqueness race: {e.orig}")
            raise ConflictError(EMAIL_TAKEN) from e
