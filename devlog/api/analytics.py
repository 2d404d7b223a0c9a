"""Analytics API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from devlog.api.dependencies import get_analytics_service, get_current_user
from devlog.models.user import User
from devlog.schemas.analytics import TeamOverview, UserStats
from devlog.services.analytics import AnalyticsService

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/stats", response_model=UserStats)
async def get_stats(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AnalyticsService, Depends(get_analytics_service)],
):
    """Entry count for the current user."""
    return service.user_stats(current_user.id)


@router.get("/team", response_model=TeamOverview)
async def get_team(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[AnalyticsService, Depends(get_analytics_service)],
):
    """List known users (capped), without credentials."""
    return service.team_overview()
