"""Analytics schemas."""

from pydantic import BaseModel, ConfigDict


class UserStats(BaseModel):
    """Usage counts for one user."""

    total_entries: int


class TeamMember(BaseModel):
    """A known user as shown in the team overview."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    team: str


class TeamOverview(BaseModel):
    """Bounded listing of known users."""

    members: list[TeamMember]
