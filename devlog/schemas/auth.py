"""Authentication schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class UserRegister(BaseModel):
    """User registration request."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=72)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v.strip()


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(BaseModel):
    """Public user view returned alongside a token."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
    team: str


class AuthResponse(BaseModel):
    """Authentication response with token and user info."""

    token: str
    token_type: str = "bearer"  # noqa: S105
    user: UserResponse
