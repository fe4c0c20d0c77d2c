import pytest
from fastapi.testclient import TestClient

from laborconnect.core.config import Settings
from laborconnect.main import create_app
from laborconnect.models.user import UserRole
from laborconnect.schemas.user import UserCreate
from laborconnect.schemas.profile import WorkerProfileCreate, EmployerProfileCreate
from laborconnect.storage import MemoryStore, SqlStore


@pytest.fixture
def settings():
    return Settings(
        STORAGE_BACKEND="memory",
        JWT_SECRET_KEY="test-secret",
        LOG_LEVEL="WARNING",
    )


@pytest.fixture(params=["memory", "sql"])
def store(request):
    if request.param == "memory":
        store = MemoryStore()
    else:
        store = SqlStore("sqlite://")
    yield store
    store.close()


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def app(settings, memory_store):
    return create_app(settings=settings, store=memory_store)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


def make_user(store, email, role=UserRole.WORKER, first_name="Sam", last_name="Lee"):
    return store.create_user(UserCreate(
        email=email,
        password="not-a-real-hash",
        first_name=first_name,
        last_name=last_name,
        role=role,
    ))


def make_worker(store, email, skills="General Labor", location="Austin, TX",
                availability="Available Now", experience="3 years"):
    user = make_user(store, email, UserRole.WORKER)
    profile = store.create_worker_profile(WorkerProfileCreate(
        user_id=user.id,
        skills=skills,
        experience=experience,
        location=location,
        availability=availability,
    ))
    return user, profile


def make_employer(store, email, company_name="Acme Builders"):
    user = make_user(store, email, UserRole.EMPLOYER)
    store.create_employer_profile(EmployerProfileCreate(
        user_id=user.id,
        company_name=company_name,
        industry="Construction",
    ))
    return user


def worker_payload(email="worker@example.com", **overrides):
    payload = {
        "email": email,
        "password": "password123",
        "firstName": "Maria",
        "lastName": "Lopez",
        "role": "worker",
        "phone": "555-0100",
        "skills": "Professional Cleaner, Organizing",
        "experience": "5 years",
        "location": "Denver, CO",
    }
    payload.update(overrides)
    return payload


def employer_payload(email="boss@example.com", **overrides):
    payload = {
        "email": email,
        "password": "password123",
        "firstName": "Tom",
        "lastName": "Baker",
        "role": "employer",
        "companyName": "Baker Homes",
        "industry": "Construction",
        "jobNeeds": "Framers",
        "location": "Denver, CO",
    }
    payload.update(overrides)
    return payload
