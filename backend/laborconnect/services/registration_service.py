"""
Registration Service - accounts with their role-specific profiles
"""
import logging
from ..core.exceptions import AuthenticationError, ValidationError
from ..core.security import get_password_hash, verify_password
from ..models.user import UserRole
from ..schemas.auth import UserRegister
from ..schemas.user import UserCreate, UserInDB
from ..schemas.profile import (
    WorkerProfileCreate,
    WorkerProfileResponse,
    EmployerProfileCreate,
    EmployerProfileResponse,
)
from ..storage.base import EntityStore

logger = logging.getLogger(__name__)


def _require_user_with_role(store: EntityStore, user_id: str, role: UserRole) -> UserInDB:
    user = store.get_user(user_id)
    if user is None:
        raise ValidationError(f"Unknown user: {user_id}")
    if user.role != role:
        raise ValidationError(f"User {user_id} is not a {role.value}")
    return user


def create_worker_profile(store: EntityStore, data: WorkerProfileCreate) -> WorkerProfileResponse:
    """Create a worker profile for an existing worker-role user"""
    _require_user_with_role(store, data.user_id, UserRole.WORKER)
    return store.create_worker_profile(data)


def create_employer_profile(store: EntityStore, data: EmployerProfileCreate) -> EmployerProfileResponse:
    """Create an employer profile for an existing employer-role user"""
    _require_user_with_role(store, data.user_id, UserRole.EMPLOYER)
    return store.create_employer_profile(data)


def register_user(store: EntityStore, payload: UserRegister) -> UserInDB:
    """
    Register a user and create the profile matching their role

    Args:
        store: Entity store
        payload: Validated registration request (role-specific fields present)

    Returns:
        The stored user

    Raises:
        DuplicateEmailError: the email is already registered
    """
    user = store.create_user(UserCreate(
        email=payload.email,
        password=get_password_hash(payload.password),
        first_name=payload.first_name,
        last_name=payload.last_name,
        role=payload.role,
        phone=payload.phone,
    ))

    if user.role == UserRole.WORKER:
        create_worker_profile(store, WorkerProfileCreate(
            user_id=user.id,
            skills=payload.skills,
            experience=payload.experience,
            location=payload.location,
            availability=payload.availability,
            description=payload.description,
            hourly_rate=payload.hourly_rate,
        ))
    else:
        create_employer_profile(store, EmployerProfileCreate(
            user_id=user.id,
            company_name=payload.company_name,
            industry=payload.industry,
            job_needs=payload.job_needs,
            location=payload.location,
        ))

    logger.info(f"Registered {user.role.value} {user.id}")
    return user


def authenticate_user(store: EntityStore, email: str, password: str) -> UserInDB:
    """Return the user for valid credentials, else raise AuthenticationError"""
    user = store.get_user_by_email(email)
    if user is None or not verify_password(password, user.password):
        logger.info("Rejected login attempt")
        raise AuthenticationError()
    return user
