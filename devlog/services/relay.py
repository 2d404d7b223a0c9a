"""Real-time chat and WebRTC signaling relay.

Presence lives in per-process dictionaries keyed by connection id. They are
reset on restart and never consulted for identity or ownership: the sender of
every event is the user authenticated when the socket connected.
"""

import logging
import uuid
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from fastapi import WebSocket
from pydantic import ValidationError

from devlog.schemas.chat import ChatMessage, IceCandidate, Typing, VideoAnswer, VideoOffer

logger = logging.getLogger(__name__)


class RelayEvent(StrEnum):
    """Event names exchanged over the socket."""

    # Inbound
    JOIN = "join"
    SEND_MESSAGE = "send-message"
    TYPING = "typing"
    VIDEO_JOIN = "video-join"
    VIDEO_OFFER = "video-offer"
    VIDEO_ANSWER = "video-answer"
    ICE_CANDIDATE = "ice-candidate"
    LEAVE_VIDEO = "leave-video"

    # Outbound
    USER_JOINED = "user-joined"
    USER_LEFT = "user-left"
    RECEIVE_MESSAGE = "receive-message"
    USER_TYPING = "user-typing"
    ONLINE_USERS = "online-users"
    USER_LEFT_VIDEO = "user-left-video"
    ERROR = "error"


@dataclass
class Connection:
    """One open socket and the user it authenticated as."""

    websocket: WebSocket
    user_id: int
    user_name: str
    in_chat: bool = False
    connected_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass
class VideoUser:
    """Entry in the video lobby."""

    id: int
    name: str
    connection_id: str


class RealtimeRelay:
    """Forwards chat messages and call signals between connected users."""

    def __init__(self) -> None:
        self.connections: dict[str, Connection] = {}
        self.video_users: dict[str, VideoUser] = {}
        self._handlers: dict[str, Callable[[str, dict], Awaitable[None]]] = {
            RelayEvent.JOIN: self._on_join,
            RelayEvent.SEND_MESSAGE: self._on_send_message,
            RelayEvent.TYPING: self._on_typing,
            RelayEvent.VIDEO_JOIN: self._on_video_join,
            RelayEvent.VIDEO_OFFER: self._on_video_offer,
            RelayEvent.VIDEO_ANSWER: self._on_video_answer,
            RelayEvent.ICE_CANDIDATE: self._on_ice_candidate,
            RelayEvent.LEAVE_VIDEO: self._on_leave_video,
        }

    async def connect(self, websocket: WebSocket, user_id: int, user_name: str) -> str:
        await websocket.accept()
        connection_id = uuid.uuid4().hex
        self.connections[connection_id] = Connection(websocket, user_id, user_name)
        logger.info(f"Relay connected: user={user_id}, connection={connection_id}")
        return connection_id

    async def disconnect(self, connection_id: str) -> None:
        connection = self.connections.pop(connection_id, None)
        if connection is None:
            return

        if connection.in_chat:
            await self.broadcast(
                RelayEvent.USER_LEFT,
                {
                    "name": connection.user_name,
                    "message": f"{connection.user_name} left the chat",
                },
            )
        await self._leave_video(connection_id)
        logger.info(f"Relay disconnected: user={connection.user_id}, connection={connection_id}")

    async def handle(self, connection_id: str, event: str, data: dict) -> None:
        """Route one inbound event. Unknown events and bad payloads are reported to the sender."""
        handler = self._handlers.get(event)
        if handler is None:
            await self.emit(connection_id, RelayEvent.ERROR, {"message": f"Unknown event: {event}"})
            return
        try:
            await handler(connection_id, data)
        except ValidationError as e:
            await self.emit(
                connection_id,
                RelayEvent.ERROR,
                {"message": f"Invalid payload for {event}", "errors": e.errors(include_context=False)},
            )

    async def emit(self, connection_id: str, event: str, data: Any) -> None:
        connection = self.connections.get(connection_id)
        if connection is None:
            return
        try:
            await connection.websocket.send_json({"event": str(event), "data": data})
        except Exception as e:
            logger.warning(f"Dropping connection {connection_id} after send failure: {e}")
            self.connections.pop(connection_id, None)
            self.video_users.pop(connection_id, None)

    async def broadcast(self, event: str, data: Any, exclude: str | None = None) -> None:
        for connection_id in list(self.connections):
            if connection_id != exclude:
                await self.emit(connection_id, event, data)

    async def _on_join(self, connection_id: str, data: dict) -> None:
        connection = self.connections.get(connection_id)
        if connection is None:
            return
        connection.in_chat = True
        await self.broadcast(
            RelayEvent.USER_JOINED,
            {"name": connection.user_name, "message": f"{connection.user_name} joined the chat"},
        )

    async def _on_send_message(self, connection_id: str, data: dict) -> None:
        payload = ChatMessage.model_validate(data)
        connection = self.connections.get(connection_id)
        if connection is None:
            return
        now = datetime.now(UTC)
        await self.broadcast(
            RelayEvent.RECEIVE_MESSAGE,
            {
                "id": int(now.timestamp() * 1000),
                "user_id": connection.user_id,
                "user_name": connection.user_name,
                "message": payload.message,
                "timestamp": now.isoformat(),
            },
        )

    async def _on_typing(self, connection_id: str, data: dict) -> None:
        payload = Typing.model_validate(data)
        connection = self.connections.get(connection_id)
        if connection is None:
            return
        await self.broadcast(
            RelayEvent.USER_TYPING,
            {"user_name": connection.user_name, "is_typing": payload.is_typing},
            exclude=connection_id,
        )

    async def _on_video_join(self, connection_id: str, data: dict) -> None:
        connection = self.connections.get(connection_id)
        if connection is None:
            return
        self.video_users[connection_id] = VideoUser(
            id=connection.user_id,
            name=connection.user_name,
            connection_id=connection_id,
        )
        await self._emit_online_users()

    async def _on_video_offer(self, connection_id: str, data: dict) -> None:
        payload = VideoOffer.model_validate(data)
        sender = self.connections.get(connection_id)
        if sender is None:
            return
        await self._signal(
            payload.to,
            RelayEvent.VIDEO_OFFER,
            {"from": sender.user_id, "from_name": sender.user_name, "offer": payload.offer},
        )

    async def _on_video_answer(self, connection_id: str, data: dict) -> None:
        payload = VideoAnswer.model_validate(data)
        sender = self.connections.get(connection_id)
        if sender is None:
            return
        await self._signal(
            payload.to, RelayEvent.VIDEO_ANSWER, {"from": sender.user_id, "answer": payload.answer}
        )

    async def _on_ice_candidate(self, connection_id: str, data: dict) -> None:
        payload = IceCandidate.model_validate(data)
        sender = self.connections.get(connection_id)
        if sender is None:
            return
        await self._signal(
            payload.to,
            RelayEvent.ICE_CANDIDATE,
            {"from": sender.user_id, "candidate": payload.candidate},
        )

    async def _on_leave_video(self, connection_id: str, data: dict) -> None:
        await self._leave_video(connection_id)

    async def _leave_video(self, connection_id: str) -> None:
        user = self.video_users.pop(connection_id, None)
        if user is None:
            return
        await self.broadcast(RelayEvent.USER_LEFT_VIDEO, {"user_id": user.id})
        await self._emit_online_users()

    async def _signal(self, to_user_id: int, event: str, data: dict) -> None:
        target = self.find_video_user(to_user_id)
        if target is None:
            logger.debug(f"No video user {to_user_id} for {event}, dropping")
            return
        await self.emit(target.connection_id, event, data)

    async def _emit_online_users(self) -> None:
        users = [{"id": user.id, "name": user.name} for user in self.video_users.values()]
        await self.broadcast(RelayEvent.ONLINE_USERS, users)

    def find_video_user(self, user_id: int) -> VideoUser | None:
        return next((user for user in self.video_users.values() if user.id == user_id), None)


relay = RealtimeRelay()
