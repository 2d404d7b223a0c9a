"""WebSocket endpoint for team chat and video-call signaling."""

import logging

from fastapi import APIRouter, Query, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from devlog.api.dependencies import resolve_user
from devlog.database import SessionLocal
from devlog.errors import UnauthorizedError
from devlog.schemas.chat import Frame
from devlog.services.relay import RelayEvent, relay

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["websocket"])


@router.websocket("/ws")
async def websocket_relay(
    websocket: WebSocket,
    token: str = Query(...),
) -> None:
    """Relay chat messages and WebRTC signals between authenticated users.

    Authentication via token query parameter (WebSocket doesn't support headers).
    """
    # Manual DB session for WebSocket (can't use Depends normally)
    db = SessionLocal()
    try:
        user = resolve_user(db, token)
        user_id, user_name = user.id, user.name
    except UnauthorizedError:
        await websocket.close(code=4001, reason="Invalid token")
        return
    finally:
        db.close()

    connection_id = await relay.connect(websocket, user_id, user_name)
    try:
        while True:
            raw = await websocket.receive_text()
            try:
                frame = Frame.model_validate_json(raw)
            except ValidationError:
                await relay.emit(connection_id, RelayEvent.ERROR, {"message": "Malformed frame"})
                continue
            await relay.handle(connection_id, frame.event, frame.data)
    except WebSocketDisconnect:
        pass
    except Exception as e:
        logger.error(f"WebSocket error: {e}", exc_info=True)
    finally:
        await relay.disconnect(connection_id)
