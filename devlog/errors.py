"""
Domain exceptions for the DevLog API.

Services raise these instead of HTTP exceptions; the handlers registered in
``devlog.main`` turn every one of them into the same response shape::

    {"detail": "...", "code": "...", "details": {...}}

Usage:
    from devlog.errors import ForbiddenError, NotFoundError

    if entry is None:
        raise NotFoundError("Entry", entry_id)
    if entry.user_id != user_id:
        raise ForbiddenError("You do not own this entry")
"""

from typing import Any

from fastapi import status


class DevLogError(Exception):
    """Base exception for all DevLog errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "detail": self.message,
            "code": self.code,
            "details": self.details,
        }


# ============================================
# Client errors (4xx)
# ============================================


class ValidationError(DevLogError):
    """Malformed or missing input."""

    status_code = 422
    code = "VALIDATION_ERROR"

    def __init__(self, message: str = "Validation failed", errors: list[dict] | None = None):
        super().__init__(message, details={"errors": errors or []})


class ConflictError(DevLogError):
    """A uniqueness rule was violated."""

    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"


class UnauthorizedError(DevLogError):
    """Missing or bad credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"

    def __init__(self, message: str = "Could not validate credentials"):
        super().__init__(message)


class InvalidTokenError(UnauthorizedError):
    """Session token has a bad signature, is expired, or is malformed."""

    code = "INVALID_TOKEN"

    def __init__(self):
        super().__init__("Could not validate credentials")


class ForbiddenError(DevLogError):
    """Authenticated, but not allowed to act on this resource."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"


class NotFoundError(DevLogError):
    """Referenced entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            f"{resource_type} {resource_id} not found",
            details={"resource_type": resource_type, "resource_id": str(resource_id)},
        )


# ============================================
# Server errors (5xx)
# ============================================


class InternalError(DevLogError):
    """Store or infrastructure failure."""

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
