"""
Database models
"""
from .user import User, UserRole
from .profile import WorkerProfile, EmployerProfile
from .connection import Connection, ConnectionStatus
from .chat_message import ChatMessage
from .contact_message import ContactMessage

__all__ = [
    "User",
    "UserRole",
    "WorkerProfile",
    "EmployerProfile",
    "Connection",
    "ConnectionStatus",
    "ChatMessage",
    "ContactMessage",
]
