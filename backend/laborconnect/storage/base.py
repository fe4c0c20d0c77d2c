"""
Entity store contract shared by the memory and SQL backends
"""
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Dict, List, Optional
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

DEFAULT_AVAILABILITY = "Available Now"
DEFAULT_CHAT_LIMIT = 50


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def matches_worker_filters(profile: WorkerProfileResponse, filters: Optional[WorkerFilters]) -> bool:
    """
    Apply worker search filters conjunctively

    skills and location match as case-insensitive substrings, availability
    must match exactly. Empty or missing filters match everything.
    """
    if filters is None:
        return True
    if filters.skills and filters.skills.lower() not in profile.skills.lower():
        return False
    if filters.location and filters.location.lower() not in profile.location.lower():
        return False
    if filters.availability and profile.availability != filters.availability:
        return False
    return True


class EntityStore(ABC):
    """Storage for users, profiles, connections, chat and contact messages.

    All records are insert-only. Every create assigns a fresh identifier and,
    where the entity has one, a server-side UTC timestamp.
    """

    # Users
    @abstractmethod
    def create_user(self, data: UserCreate) -> UserInDB:
        """Insert a user; raises DuplicateEmailError if the email is taken"""

    @abstractmethod
    def get_user(self, user_id: str) -> Optional[UserInDB]:
        ...

    @abstractmethod
    def get_user_by_email(self, email: str) -> Optional[UserInDB]:
        ...

    # Profiles
    @abstractmethod
    def create_worker_profile(self, data: WorkerProfileCreate) -> WorkerProfileResponse:
        ...

    @abstractmethod
    def get_worker_profile(self, user_id: str) -> Optional[WorkerProfileResponse]:
        ...

    @abstractmethod
    def create_employer_profile(self, data: EmployerProfileCreate) -> EmployerProfileResponse:
        ...

    @abstractmethod
    def get_employer_profile(self, user_id: str) -> Optional[EmployerProfileResponse]:
        ...

    @abstractmethod
    def get_workers_with_profiles(self, filters: Optional[WorkerFilters] = None) -> List[WorkerWithProfile]:
        """Join worker profiles to worker-role users and filter them"""

    def get_worker_with_profile(self, user_id: str) -> Optional[WorkerWithProfile]:
        user = self.get_user(user_id)
        if user is None or user.role != UserRole.WORKER:
            return None
        profile = self.get_worker_profile(user_id)
        if profile is None:
            return None
        return WorkerWithProfile(**user.model_dump(), worker_profile=profile)

    # Connections
    @abstractmethod
    def create_connection(self, data: ConnectionCreate) -> ConnectionResponse:
        ...

    @abstractmethod
    def get_connections_by_employer(self, employer_id: str) -> List[ConnectionWithWorker]:
        """Employer's connections joined with worker user and profile"""

    @abstractmethod
    def get_connections_by_worker(self, worker_id: str) -> List[ConnectionResponse]:
        ...

    # Chat
    @abstractmethod
    def add_chat_message(self, data: ChatMessageCreate) -> ChatMessageResponse:
        ...

    @abstractmethod
    def get_chat_messages(self, limit: int = DEFAULT_CHAT_LIMIT) -> List[ChatMessageResponse]:
        """Most recent `limit` messages, oldest first"""

    # Contact
    @abstractmethod
    def create_contact_message(self, data: ContactMessageCreate) -> ContactMessageResponse:
        ...

    @abstractmethod
    def stats(self) -> Dict[str, int]:
        """Record counts per entity"""

    def close(self) -> None:
        pass
