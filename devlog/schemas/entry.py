"""Entry schemas."""

import re
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Scheme is optional, host must contain a dot, path/query/fragment are free-form
URL_PATTERN = re.compile(
    r"^(?:https?://)?"
    r"(?:[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?\.)+[A-Za-z]{2,63}"
    r"(?::\d{1,5})?"
    r"(?:[/?#]\S*)?$"
)

TEXT_FIELDS = ("work_done", "blockers", "learnings")


def _check_text(v: str | None) -> str:
    if v is None:
        raise ValueError("must not be null")
    if not v.strip():
        raise ValueError("must not be empty")
    return v


def _check_link(v: str | None) -> str | None:
    if v is None:
        return None
    v = v.strip()
    if not v:
        return None
    if not URL_PATTERN.match(v):
        raise ValueError("must be a URL")
    return v


class EntryCreate(BaseModel):
    """Create a new log entry."""

    work_done: str = Field(..., max_length=10000)
    blockers: str = Field(..., max_length=10000)
    learnings: str = Field(..., max_length=10000)
    github_commit_link: str | None = Field(None, max_length=2048)
    date: datetime | None = None

    @field_validator(*TEXT_FIELDS)
    @classmethod
    def text_not_empty(cls, v: str) -> str:
        return _check_text(v)

    @field_validator("github_commit_link")
    @classmethod
    def link_is_url(cls, v: str | None) -> str | None:
        return _check_link(v)


class EntryUpdate(BaseModel):
    """Patch an entry. Only fields present in the request are applied."""

    work_done: str | None = Field(None, max_length=10000)
    blockers: str | None = Field(None, max_length=10000)
    learnings: str | None = Field(None, max_length=10000)
    github_commit_link: str | None = Field(None, max_length=2048)

    @field_validator(*TEXT_FIELDS)
    @classmethod
    def text_not_empty(cls, v: str | None) -> str:
        # Only runs for fields the client actually sent
        return _check_text(v)

    @field_validator("github_commit_link")
    @classmethod
    def link_is_url(cls, v: str | None) -> str | None:
        return _check_link(v)


class EntryResponse(BaseModel):
    """Entry response, annotated with the owner's display name."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    user_name: str = ""
    date: datetime
    work_done: str
    blockers: str
    learnings: str
    github_commit_link: str | None
    created_at: datetime
    updated_at: datetime


class DeleteResponse(BaseModel):
    """Acknowledgment for a deletion."""

    message: str
