"""
SQLAlchemy-backed entity store
"""
import logging
from typing import Dict, List, Optional
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from ..core.database import create_db_engine, create_session_factory, init_db
from ..core.exceptions import DuplicateEmailError
from ..models.user import User, UserRole
from ..models.profile import WorkerProfile, EmployerProfile
from ..models.connection import Connection, ConnectionStatus
from ..models.chat_message import ChatMessage
from ..models.contact_message import ContactMessage
from ..schemas.user import UserCreate, UserInDB, UserResponse
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
from .base import DEFAULT_AVAILABILITY, DEFAULT_CHAT_LIMIT, EntityStore, new_id, utcnow

logger = logging.getLogger(__name__)


def _worker_with_profile(user: User, profile: WorkerProfile) -> WorkerWithProfile:
    return WorkerWithProfile(
        **UserResponse.model_validate(user).model_dump(),
        worker_profile=WorkerProfileResponse.model_validate(profile),
    )


class SqlStore(EntityStore):
    """Entity store on any SQLAlchemy database; one session per operation"""

    def __init__(self, database_url: Optional[str] = None, engine: Optional[Engine] = None):
        if engine is None:
            engine = create_db_engine(database_url)
        self.engine = engine
        self.SessionLocal = create_session_factory(engine)
        init_db(engine)

    # Users

    def create_user(self, data: UserCreate) -> UserInDB:
        with self.SessionLocal() as db:
            if db.query(User).filter(User.email == data.email).first():
                raise DuplicateEmailError()
            user = User(id=new_id(), created_at=utcnow(), **data.model_dump())
            db.add(user)
            try:
                db.commit()
            except IntegrityError:
                # Lost a race on the unique email index
                db.rollback()
                raise DuplicateEmailError()
            logger.info(f"Created {user.role.value} user {user.id}")
            return UserInDB.model_validate(user)

    def get_user(self, user_id: str) -> Optional[UserInDB]:
        with self.SessionLocal() as db:
            user = db.get(User, user_id)
            return UserInDB.model_validate(user) if user else None

    def get_user_by_email(self, email: str) -> Optional[UserInDB]:
        with self.SessionLocal() as db:
            user = db.query(User).filter(User.email == email).first()
            return UserInDB.model_validate(user) if user else None

    # Profiles

    def create_worker_profile(self, data: WorkerProfileCreate) -> WorkerProfileResponse:
        fields = data.model_dump()
        fields["availability"] = fields.get("availability") or DEFAULT_AVAILABILITY
        with self.SessionLocal() as db:
            profile = WorkerProfile(id=new_id(), **fields)
            db.add(profile)
            db.commit()
            return WorkerProfileResponse.model_validate(profile)

    def get_worker_profile(self, user_id: str) -> Optional[WorkerProfileResponse]:
        with self.SessionLocal() as db:
            profile = db.query(WorkerProfile).filter(WorkerProfile.user_id == user_id).first()
            return WorkerProfileResponse.model_validate(profile) if profile else None

    def create_employer_profile(self, data: EmployerProfileCreate) -> EmployerProfileResponse:
        with self.SessionLocal() as db:
            profile = EmployerProfile(id=new_id(), **data.model_dump())
            db.add(profile)
            db.commit()
            return EmployerProfileResponse.model_validate(profile)

    def get_employer_profile(self, user_id: str) -> Optional[EmployerProfileResponse]:
        with self.SessionLocal() as db:
            profile = db.query(EmployerProfile).filter(EmployerProfile.user_id == user_id).first()
            return EmployerProfileResponse.model_validate(profile) if profile else None

    def get_workers_with_profiles(self, filters: Optional[WorkerFilters] = None) -> List[WorkerWithProfile]:
        with self.SessionLocal() as db:
            query = db.query(User, WorkerProfile).join(
                WorkerProfile, WorkerProfile.user_id == User.id
            ).filter(User.role == UserRole.WORKER)

            if filters is not None:
                if filters.skills:
                    query = query.filter(
                        WorkerProfile.skills.icontains(filters.skills, autoescape=True)
                    )
                if filters.location:
                    query = query.filter(
                        WorkerProfile.location.icontains(filters.location, autoescape=True)
                    )
                if filters.availability:
                    query = query.filter(WorkerProfile.availability == filters.availability)

            return [_worker_with_profile(user, profile) for user, profile in query.all()]

    # Connections

    def create_connection(self, data: ConnectionCreate) -> ConnectionResponse:
        with self.SessionLocal() as db:
            connection = Connection(
                id=new_id(),
                employer_id=data.employer_id,
                worker_id=data.worker_id,
                status=data.status or ConnectionStatus.CONNECTED,
                last_project=data.last_project,
                created_at=utcnow(),
            )
            db.add(connection)
            db.commit()
            return ConnectionResponse.model_validate(connection)

    def get_connections_by_employer(self, employer_id: str) -> List[ConnectionWithWorker]:
        with self.SessionLocal() as db:
            rows = db.query(Connection, User, WorkerProfile).join(
                User, User.id == Connection.worker_id
            ).join(
                WorkerProfile, WorkerProfile.user_id == Connection.worker_id
            ).filter(
                Connection.employer_id == employer_id
            ).order_by(Connection.created_at).all()

            return [
                ConnectionWithWorker(
                    **ConnectionResponse.model_validate(connection).model_dump(),
                    worker=_worker_with_profile(worker, profile),
                )
                for connection, worker, profile in rows
            ]

    def get_connections_by_worker(self, worker_id: str) -> List[ConnectionResponse]:
        with self.SessionLocal() as db:
            connections = db.query(Connection).filter(
                Connection.worker_id == worker_id
            ).order_by(Connection.created_at).all()
            return [ConnectionResponse.model_validate(c) for c in connections]

    # Chat

    def add_chat_message(self, data: ChatMessageCreate) -> ChatMessageResponse:
        with self.SessionLocal() as db:
            message = ChatMessage(id=new_id(), timestamp=utcnow(), **data.model_dump())
            db.add(message)
            db.commit()
            return ChatMessageResponse.model_validate(message)

    def get_chat_messages(self, limit: int = DEFAULT_CHAT_LIMIT) -> List[ChatMessageResponse]:
        if limit <= 0:
            return []
        with self.SessionLocal() as db:
            latest = db.query(ChatMessage).order_by(
                ChatMessage.timestamp.desc(), ChatMessage.seq.desc()
            ).limit(limit).all()
            return [ChatMessageResponse.model_validate(m) for m in reversed(latest)]

    # Contact

    def create_contact_message(self, data: ContactMessageCreate) -> ContactMessageResponse:
        with self.SessionLocal() as db:
            message = ContactMessage(id=new_id(), created_at=utcnow(), **data.model_dump())
            db.add(message)
            db.commit()
            return ContactMessageResponse.model_validate(message)

    def stats(self) -> Dict[str, int]:
        with self.SessionLocal() as db:
            return {
                "users": db.query(User).count(),
                "worker_profiles": db.query(WorkerProfile).count(),
                "employer_profiles": db.query(EmployerProfile).count(),
                "connections": db.query(Connection).count(),
                "chat_messages": db.query(ChatMessage).count(),
                "contact_messages": db.query(ContactMessage).count(),
            }

    def close(self) -> None:
        self.engine.dispose()
