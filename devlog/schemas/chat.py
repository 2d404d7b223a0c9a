"""Realtime relay frame schemas."""

from typing import Any

from pydantic import BaseModel, Field


class Frame(BaseModel):
    """Envelope for every WebSocket message, in both directions."""

    event: str = Field(..., min_length=1, max_length=50)
    data: dict[str, Any] = Field(default_factory=dict)


class ChatMessage(BaseModel):
    """Payload of a `send-message` event."""

    message: str = Field(..., min_length=1, max_length=5000)


class Typing(BaseModel):
    """Payload of a `typing` event."""

    is_typing: bool = True


class VideoOffer(BaseModel):
    """Session description offer addressed to another user."""

    to: int
    offer: dict[str, Any]


class VideoAnswer(BaseModel):
    """Session description answer addressed to another user."""

    to: int
    answer: dict[str, Any]


class IceCandidate(BaseModel):
    """ICE candidate addressed to another user."""

    to: int
    candidate: dict[str, Any]
