"""
Chat API endpoints: message history and the relay WebSocket
"""
import logging
from fastapi import APIRouter, Depends, Query, WebSocket, WebSocketDisconnect, status
from typing import List, Optional
from ..core.config import Settings
from ..core.dependencies import get_chat_relay, get_settings, get_store
from ..core.security import decode_access_token
from ..schemas.chat import ChatMessageResponse
from ..services.chat_relay import ChatIdentity, ChatRelay
from ..storage.base import EntityStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get("/messages", response_model=List[ChatMessageResponse])
async def list_chat_messages(
    limit: Optional[int] = Query(default=None, description="Number of most recent messages"),
    store: EntityStore = Depends(get_store),
    settings: Settings = Depends(get_settings)
):
    """Most recent chat messages, oldest first"""
    if limit is None:
        limit = settings.CHAT_HISTORY_LIMIT
    return store.get_chat_messages(limit)


async def chat_websocket(
    websocket: WebSocket,
    token: Optional[str] = Query(default=None),
    relay: ChatRelay = Depends(get_chat_relay),
    settings: Settings = Depends(get_settings)
):
    """
    Global chat socket

    Inbound frames: {"type": "chat_message", "userId", "userName", "message"}
    Outbound frames: {"type": "chat_message", "data": ChatMessage}

    With a `token` from login, userId and userName come from the token.
    """
    identity = None
    if token is not None:
        claims = decode_access_token(token, settings)
        if not claims or not claims.get("sub"):
            logger.warning("Rejected chat connection with invalid token")
            await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
            return
        identity = ChatIdentity(user_id=claims["sub"], user_name=claims.get("name") or claims["sub"])

    connection_id = await relay.connect(websocket)
    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            raw = message.get("text")
            if raw is None:
                raw = (message.get("bytes") or b"").decode("utf-8", errors="replace")
            await relay.handle_frame(raw, identity)
    except WebSocketDisconnect:
        pass
    finally:
        await relay.disconnect(connection_id)
