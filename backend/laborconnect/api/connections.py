"""
Connection API endpoints
"""
from fastapi import APIRouter, Depends, status
from typing import List
from ..core.dependencies import get_store
from ..schemas.connection import ConnectionCreate, ConnectionResponse, ConnectionWithWorker
from ..services import connection_service
from ..storage.base import EntityStore

router = APIRouter(prefix="/connections", tags=["connections"])


@router.post("", response_model=ConnectionResponse, status_code=status.HTTP_201_CREATED)
async def create_connection(
    connection_data: ConnectionCreate,
    store: EntityStore = Depends(get_store)
):
    """Connect an employer with a worker (status connected or hired)"""
    return connection_service.create_connection(store, connection_data)


@router.get("/worker/{worker_id}", response_model=List[ConnectionResponse])
async def list_worker_connections(
    worker_id: str,
    store: EntityStore = Depends(get_store)
):
    """List connections that include a worker"""
    return connection_service.list_worker_connections(store, worker_id)


@router.get("/{employer_id}", response_model=List[ConnectionWithWorker])
async def list_employer_connections(
    employer_id: str,
    store: EntityStore = Depends(get_store)
):
    """List an employer's connections with worker details"""
    return connection_service.list_employer_connections(store, employer_id)
