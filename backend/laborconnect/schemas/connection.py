"""
Connection schemas
"""
from pydantic import Field
from typing import Optional
from datetime import datetime
from ..models.connection import ConnectionStatus
from .base import CamelModel
from .profile import WorkerWithProfile


class ConnectionCreate(CamelModel):
    """Create connection schema; status defaults to connected"""
    employer_id: str = Field(..., min_length=1)
    worker_id: str = Field(..., min_length=1)
    status: Optional[ConnectionStatus] = None
    last_project: Optional[str] = None


class ConnectionResponse(CamelModel):
    id: str
    employer_id: str
    worker_id: str
    status: ConnectionStatus
    last_project: Optional[str] = None
    created_at: datetime


class ConnectionWithWorker(ConnectionResponse):
    """Connection annotated with the worker and their profile"""
    worker: WorkerWithProfile
