"""
Pydantic schemas for request/response validation
"""
from .user import UserCreate, UserResponse, UserInDB
from .auth import UserRegister, UserLogin, LoginResponse
from .profile import (
    WorkerProfileCreate,
    WorkerProfileResponse,
    EmployerProfileCreate,
    EmployerProfileResponse,
    WorkerFilters,
    WorkerWithProfile,
)
from .connection import ConnectionCreate, ConnectionResponse, ConnectionWithWorker
from .chat import ChatMessageCreate, ChatMessageResponse, ChatFrame, ChatBroadcast
from .contact import ContactMessageCreate, ContactMessageResponse, ContactAck

__all__ = [
    "UserCreate",
    "UserResponse",
    "UserInDB",
    "UserRegister",
    "UserLogin",
    "LoginResponse",
    "WorkerProfileCreate",
    "WorkerProfileResponse",
    "EmployerProfileCreate",
    "EmployerProfileResponse",
    "WorkerFilters",
    "WorkerWithProfile",
    "ConnectionCreate",
    "ConnectionResponse",
    "ConnectionWithWorker",
    "ChatMessageCreate",
    "ChatMessageResponse",
    "ChatFrame",
    "ChatBroadcast",
    "ContactMessageCreate",
    "ContactMessageResponse",
    "ContactAck",
]
