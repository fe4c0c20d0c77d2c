"""
In-memory entity store (process lifetime only)
"""
import logging
import threading
from typing import Dict, List, Optional
from ..core.exceptions import DuplicateEmailError
from ..models.connection import ConnectionStatus
from ..models.user import UserRole
from ..schemas.user import UserCreate, UserInDB
from ..schemas.profile import (
    WorkerProfileCreate,
    WorkerProfileResponse,
    EmployerProfileCreate,
    EmployerProfileResponse,
    WorkerFilters,
    WorkerWithProfile,
)
from ..schemas.connection import ConnectionCreate, ConnectionResponse, ConnectionWithWorker
from ..schemas.chat import ChatMessageCreate, ChatMessageResponse
from ..schemas.contact import ContactMessageCreate, ContactMessageResponse
from .base import (
    DEFAULT_AVAILABILITY,
    DEFAULT_CHAT_LIMIT,
    EntityStore,
    matches_worker_filters,
    new_id,
    utcnow,
)

logger = logging.getLogger(__name__)


class MemoryStore(EntityStore):
    """Entity store backed by dicts guarded by a single lock.

    Stored records never leave the store; callers get copies.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._users: Dict[str, UserInDB] = {}
        self._worker_profiles: Dict[str, WorkerProfileResponse] = {}
        self._employer_profiles: Dict[str, EmployerProfileResponse] = {}
        self._connections: Dict[str, ConnectionResponse] = {}
        self._chat_messages: List[ChatMessageResponse] = []
        self._contact_messages: Dict[str, ContactMessageResponse] = {}

    # Users

    def create_user(self, data: UserCreate) -> UserInDB:
        with self._lock:
            if self._find_user_by_email(data.email) is not None:
                raise DuplicateEmailError()
            user = UserInDB(id=new_id(), created_at=utcnow(), **data.model_dump())
            self._users[user.id] = user
            logger.info(f"Created {user.role.value} user {user.id}")
            return user.model_copy()

    def get_user(self, user_id: str) -> Optional[UserInDB]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user else None

    def get_user_by_email(self, email: str) -> Optional[UserInDB]:
        with self._lock:
            user = self._find_user_by_email(email)
            return user.model_copy() if user else None

    def _find_user_by_email(self, email: str) -> Optional[UserInDB]:
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    # Profiles

    def create_worker_profile(self, data: WorkerProfileCreate) -> WorkerProfileResponse:
        fields = data.model_dump()
        fields["availability"] = fields.get("availability") or DEFAULT_AVAILABILITY
        profile = WorkerProfileResponse(id=new_id(), **fields)
        with self._lock:
            self._worker_profiles[profile.id] = profile
        return profile.model_copy()

    def get_worker_profile(self, user_id: str) -> Optional[WorkerProfileResponse]:
        with self._lock:
            profile = self._find_worker_profile(user_id)
            return profile.model_copy() if profile else None

    def _find_worker_profile(self, user_id: str) -> Optional[WorkerProfileResponse]:
        for profile in self._worker_profiles.values():
            if profile.user_id == user_id:
                return profile
        return None

    def create_employer_profile(self, data: EmployerProfileCreate) -> EmployerProfileResponse:
        profile = EmployerProfileResponse(id=new_id(), **data.model_dump())
        with self._lock:
            self._employer_profiles[profile.id] = profile
        return profile.model_copy()

    def get_employer_profile(self, user_id: str) -> Optional[EmployerProfileResponse]:
        with self._lock:
            for profile in self._employer_profiles.values():
                if profile.user_id == user_id:
                    return profile.model_copy()
        return None

    def get_workers_with_profiles(self, filters: Optional[WorkerFilters] = None) -> List[WorkerWithProfile]:
        workers = []
        with self._lock:
            for profile in self._worker_profiles.values():
                user = self._users.get(profile.user_id)
                # Profiles without a worker-role owner are skipped
                if user is None or user.role != UserRole.WORKER:
                    continue
                if not matches_worker_filters(profile, filters):
                    continue
                workers.append(WorkerWithProfile(**user.model_dump(), worker_profile=profile.model_copy()))
        return workers

    # Connections

    def create_connection(self, data: ConnectionCreate) -> ConnectionResponse:
        connection = ConnectionResponse(
            id=new_id(),
            employer_id=data.employer_id,
            worker_id=data.worker_id,
            status=data.status or ConnectionStatus.CONNECTED,
            last_project=data.last_project,
            created_at=utcnow(),
        )
        with self._lock:
            self._connections[connection.id] = connection
        return connection.model_copy()

    def get_connections_by_employer(self, employer_id: str) -> List[ConnectionWithWorker]:
        results = []
        with self._lock:
            for connection in self._connections.values():
                if connection.employer_id != employer_id:
                    continue
                worker = self._users.get(connection.worker_id)
                profile = self._find_worker_profile(connection.worker_id)
                if worker is None or profile is None:
                    continue
                results.append(ConnectionWithWorker(
                    **connection.model_dump(),
                    worker=WorkerWithProfile(**worker.model_dump(), worker_profile=profile.model_copy()),
                ))
        return results

    def get_connections_by_worker(self, worker_id: str) -> List[ConnectionResponse]:
        with self._lock:
            return [
                connection.model_copy()
                for connection in self._connections.values()
                if connection.worker_id == worker_id
            ]

    # Chat

    def add_chat_message(self, data: ChatMessageCreate) -> ChatMessageResponse:
        with self._lock:
            message = ChatMessageResponse(id=new_id(), timestamp=utcnow(), **data.model_dump())
            self._chat_messages.append(message)
            return message.model_copy()

    def get_chat_messages(self, limit: int = DEFAULT_CHAT_LIMIT) -> List[ChatMessageResponse]:
        if limit <= 0:
            return []
        with self._lock:
            # sorted() is stable, so equal timestamps keep insertion order
            ordered = sorted(self._chat_messages, key=lambda m: m.timestamp)
            return [message.model_copy() for message in ordered[-limit:]]

    # Contact

    def create_contact_message(self, data: ContactMessageCreate) -> ContactMessageResponse:
        message = ContactMessageResponse(id=new_id(), created_at=utcnow(), **data.model_dump())
        with self._lock:
            self._contact_messages[message.id] = message
        return message.model_copy()

    def stats(self) -> Dict[str, int]:
        with self._lock:
            return {
                "users": len(self._users),
                "worker_profiles": len(self._worker_profiles),
                "employer_profiles": len(self._employer_profiles),
                "connections": len(self._connections),
                "chat_messages": len(self._chat_messages),
                "contact_messages": len(self._contact_messages),
            }
