"""
Contact form schemas
"""
from pydantic import EmailStr, Field
from datetime import datetime
from .base import CamelModel


class ContactMessageCreate(CamelModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    subject: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)


class ContactMessageResponse(CamelModel):
    id: str
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime


class ContactAck(CamelModel):
    """Returned to the submitter"""
    message: str
    id: str
