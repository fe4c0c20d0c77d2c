"""
Chat message schemas and WebSocket frames
"""
from pydantic import Field
from typing import Literal
from datetime import datetime
from .base import CamelModel

CHAT_MESSAGE_TYPE = "chat_message"


class ChatMessageCreate(CamelModel):
    user_id: str = Field(..., min_length=1)
    user_name: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class ChatMessageResponse(CamelModel):
    id: str
    user_id: str
    user_name: str
    message: str
    timestamp: datetime


class ChatFrame(ChatMessageCreate):
    """Inbound frame: {type: "chat_message", userId, userName, message}"""
    type: Literal["chat_message"]


class ChatBroadcast(CamelModel):
    """Outbound frame: {type: "chat_message", data: ChatMessage}"""
    type: Literal["chat_message"] = CHAT_MESSAGE_TYPE
    data: ChatMessageResponse
