"""
Global chat message model
"""
from sqlalchemy import Column, Integer, String, Text
from ..core.database import Base, UTCDateTime


class ChatMessage(Base):
    """Message posted to the global chat room"""
    __tablename__ = "chat_messages"

    seq = Column(Integer, primary_key=True, autoincrement=True)  # insertion order, breaks timestamp ties
    id = Column(String(36), unique=True, index=True, nullable=False)
    user_id = Column(String(36), nullable=False, index=True)  # not checked against users
    user_name = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    timestamp = Column(UTCDateTime, nullable=False, index=True)

    def __repr__(self):
        return f"<ChatMessage(id={self.id}, user_id={self.user_id})>"
