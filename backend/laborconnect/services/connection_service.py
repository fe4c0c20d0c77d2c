"""
Connection Service - employer/worker connection and hire records
"""
import logging
from typing import List
from ..core.exceptions import ValidationError
from ..models.connection import ConnectionStatus
from ..models.user import UserRole
from ..schemas.connection import ConnectionCreate, ConnectionResponse, ConnectionWithWorker
from ..storage.base import EntityStore

logger = logging.getLogger(__name__)


def create_connection(store: EntityStore, data: ConnectionCreate) -> ConnectionResponse:
    """
    Record a connection between an employer and a worker

    Both ids must name existing users with the matching role. Status
    defaults to "connected". Repeated requests create new rows; existing
    connections are never updated.
    """
    employer = store.get_user(data.employer_id)
    if employer is None or employer.role != UserRole.EMPLOYER:
        raise ValidationError(f"employerId {data.employer_id} does not reference an employer")

    worker = store.get_user(data.worker_id)
    if worker is None or worker.role != UserRole.WORKER:
        raise ValidationError(f"workerId {data.worker_id} does not reference a worker")

    connection = store.create_connection(ConnectionCreate(
        employer_id=data.employer_id,
        worker_id=data.worker_id,
        status=data.status or ConnectionStatus.CONNECTED,
        last_project=data.last_project,
    ))
    logger.info(
        f"Connection {connection.id}: employer {connection.employer_id} -> "
        f"worker {connection.worker_id} ({connection.status.value})"
    )
    return connection


def list_employer_connections(store: EntityStore, employer_id: str) -> List[ConnectionWithWorker]:
    return store.get_connections_by_employer(employer_id)


def list_worker_connections(store: EntityStore, worker_id: str) -> List[ConnectionResponse]:
    return store.get_connections_by_worker(worker_id)
