"""
Chat Relay - global chat room over WebSockets

Each inbound chat frame is stored through the entity store, then sent as one
serialized broadcast to every registered connection, the sender included.
There is no acknowledgment, retry or replay; history comes from the HTTP
messages endpoint.
"""
import asyncio
import json
import logging
import uuid
from dataclasses import dataclass
from typing import Dict, Optional
from pydantic import ValidationError as PydanticValidationError
from starlette.websockets import WebSocket
from ..schemas.chat import (
    CHAT_MESSAGE_TYPE,
    ChatBroadcast,
    ChatFrame,
    ChatMessageCreate,
    ChatMessageResponse,
)
from ..storage.base import EntityStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChatIdentity:
    """Identity taken from an access token instead of the frame"""
    user_id: str
    user_name: str


class ChatRelay:
    """Registry of open chat sockets and the broadcast loop"""

    def __init__(self, store: EntityStore):
        self.store = store
        self._connections: Dict[str, WebSocket] = {}
        self._lock = asyncio.Lock()

    @property
    def active_connections(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> str:
        """Complete the handshake, then register the socket; returns its connection id"""
        await websocket.accept()
        connection_id = uuid.uuid4().hex
        # Only sockets past the handshake are registered
        async with self._lock:
            self._connections[connection_id] = websocket
        logger.info(f"Chat connection {connection_id} opened ({self.active_connections} active)")
        return connection_id

    async def disconnect(self, connection_id: str) -> None:
        async with self._lock:
            removed = self._connections.pop(connection_id, None)
        if removed is not None:
            logger.info(f"Chat connection {connection_id} closed ({self.active_connections} active)")

    def parse_frame(self, raw: str, identity: Optional[ChatIdentity] = None) -> Optional[ChatMessageCreate]:
        """Validate an inbound frame; malformed frames are logged and dropped"""
        try:
            payload = json.loads(raw)
        except ValueError:
            logger.warning("Dropped chat frame: not valid JSON")
            return None

        if not isinstance(payload, dict) or payload.get("type") != CHAT_MESSAGE_TYPE:
            logger.warning("Dropped chat frame: missing type chat_message")
            return None

        if identity is not None:
            payload["userId"] = identity.user_id
            payload["userName"] = identity.user_name

        try:
            frame = ChatFrame.model_validate(payload)
        except PydanticValidationError as e:
            logger.warning(f"Dropped chat frame: {e.error_count()} invalid field(s)")
            return None

        return ChatMessageCreate(user_id=frame.user_id, user_name=frame.user_name, message=frame.message)

    async def handle_frame(self, raw: str, identity: Optional[ChatIdentity] = None) -> Optional[ChatMessageResponse]:
        """Store and broadcast one inbound frame; returns the stored message"""
        data = self.parse_frame(raw, identity)
        if data is None:
            return None

        try:
            message = self.store.add_chat_message(data)
        except Exception:
            logger.exception("Failed to store chat message")
            return None

        await self.broadcast(ChatBroadcast(data=message))
        return message

    async def broadcast(self, frame: ChatBroadcast) -> int:
        """Send a frame to a snapshot of the registry; returns the delivery count"""
        text = frame.model_dump_json(by_alias=True)
        async with self._lock:
            targets = list(self._connections.items())

        delivered = 0
        for connection_id, websocket in targets:
            try:
                await websocket.send_text(text)
                delivered += 1
            except Exception as e:
                # A failed client misses this message; the rest still get it
                logger.error(f"Broadcast to {connection_id} failed: {str(e)}", exc_info=True)
        return delivered
