"""
User schemas
"""
from pydantic import Field
from typing import Optional
from datetime import datetime
from ..models.user import UserRole
from .base import CamelModel


class UserCreate(CamelModel):
    """User fields handed to the store; password is already hashed"""
    email: str
    password: str
    first_name: str
    last_name: str
    role: UserRole
    phone: Optional[str] = None


class UserResponse(CamelModel):
    """User response schema (password omitted)"""
    id: str
    email: str
    first_name: str
    last_name: str
    role: UserRole
    phone: Optional[str] = None
    created_at: datetime


class UserInDB(UserResponse):
    """Stored user including the password hash"""
    password: str = Field(..., exclude=True)
