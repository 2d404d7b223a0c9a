"""Profile schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class ProfileUpdate(BaseModel):
    """Patch the current user's profile. Password and role are not editable here."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: EmailStr | None = Field(None, max_length=255)
    team: str | None = Field(None, max_length=255)

    @field_validator("name", "email")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()

    @field_validator("team")
    @classmethod
    def team_not_null(cls, v: str | None) -> str:
        # Team may be empty, but clearing it is done with "" rather than null
        return v or ""


class ProfileResponse(BaseModel):
    """Profile of a user, without credentials."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    team: str
    role: str
