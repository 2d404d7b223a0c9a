"""Entry API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from devlog.api.dependencies import get_current_user, get_entry_service
from devlog.models.user import User
from devlog.schemas.entry import DeleteResponse, EntryCreate, EntryResponse, EntryUpdate
from devlog.services.entries import EntryService

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.get("", response_model=list[EntryResponse])
async def get_entries(
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[EntryService, Depends(get_entry_service)],
):
    """Get the team feed, newest first."""
    return service.list_all()


@router.post("", response_model=EntryResponse, status_code=status.HTTP_201_CREATED)
async def create_entry(
    entry_data: EntryCreate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[EntryService, Depends(get_entry_service)],
):
    """Create a daily log entry."""
    return service.create(entry_data, current_user.id)


@router.get("/{entry_id}", response_model=EntryResponse)
async def get_entry(
    entry_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[EntryService, Depends(get_entry_service)],
):
    """Get a single entry."""
    return service.find_one(entry_id, current_user.id)


@router.put("/{entry_id}", response_model=EntryResponse)
async def update_entry(
    entry_id: int,
    entry_data: EntryUpdate,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[EntryService, Depends(get_entry_service)],
):
    """Update an entry (owner only)."""
    return service.update(entry_id, entry_data, current_user.id)


@router.delete("/{entry_id}", response_model=DeleteResponse)
async def delete_entry(
    entry_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    service: Annotated[EntryService, Depends(get_entry_service)],
):
    """Delete an entry (owner only)."""
    return service.remove(entry_id, current_user.id)
