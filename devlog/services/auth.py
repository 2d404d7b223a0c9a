"""Authentication service for JWT and password handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from devlog.config import get_settings
from devlog.errors import InvalidTokenError, UnauthorizedError
from devlog.models.user import User

logger = logging.getLogger(__name__)
settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class TokenPayload:
    """Identity asserted by a verified session token."""

    user_id: int
    email: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: int, email: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed JWT access token."""
    now = datetime.now(UTC)
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "email": email,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_access_token(token: str) -> TokenPayload:
    """Decode and validate a JWT token.

    Raises:
        InvalidTokenError: signature mismatch, expiry, or missing claims
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        raise InvalidTokenError() from e

    subject = payload.get("sub")
    email = payload.get("email")
    if subject is None or email is None:
        raise InvalidTokenError()
    try:
        user_id = int(subject)
    except (TypeError, ValueError) as e:
        raise InvalidTokenError() from e

    return TokenPayload(user_id=user_id, email=email)


def register_user(db: Session, name: str, email: str, password: str) -> tuple[str, User]:
    """Create a user and issue their first token.

    Raises:
        ConflictError: the email is already registered
    """
    # users.py imports the hashing helpers from this module
    from devlog.services.users import UserService

    user = UserService(db).create(name, email, password)
    logger.info(f"Registered user {user.id}")
    return create_access_token(user.id, user.email), user


def login_user(db: Session, email: str, password: str) -> tuple[str, User]:
    """Check credentials and issue a token.

    Unknown email and wrong password fail identically.
    """
    from devlog.services.users import UserService

    users = UserService(db)
    user = users.find_by_email(email)
    if user is None or not users.verify_password(password, user.password_hash):
        raise UnauthorizedError(INVALID_CREDENTIALS)
    return create_access_token(user.id, user.email), user
