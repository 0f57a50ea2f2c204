"""Pytest configuration and fixtures."""

import itertools
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from bizdocs.database import Base, get_db
from bizdocs.main import app
from bizdocs.services.storage import LocalObjectStorage, get_object_storage


class AuthHeaders(dict):
    """Dict subclass that also stores user_id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/bizdocs", "/bizdocs_test")
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "password"


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture
def session_factory():
    """Open extra sessions, e.g. one per thread; all are closed after the test."""
    sessions = []

    def _open():
        session = TestingSessionLocal()
        sessions.append(session)
        return session

    yield _open
    for session in sessions:
        session.close()


@pytest.fixture
def storage(tmp_path):
    """Object storage rooted in a per-test temporary directory."""
    return LocalObjectStorage(tmp_path / "storage", "http://testserver/storage")


@pytest.fixture(scope="function")
def client(db, storage):
    """Create a test client with database and storage overrides."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_object_storage] = lambda: storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(client, name: str, email: str, password: str = PASSWORD) -> AuthHeaders:
    response = client.post(
        "/api/v1/register", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post("/api/v1/login", json={"email": email, "password": password})
    assert response.status_code == 200
    token = response.json()["token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, email=email)


@pytest.fixture
def login_as(client):
    """Factory registering and logging in an account."""

    def _login_as(name: str, email: str, password: str = PASSWORD) -> AuthHeaders:
        return register_and_login(client, name, email, password)

    return _login_as


@pytest.fixture
def auth_headers(client):
    """Register and log in John Doe; return his auth headers."""
    return register_and_login(client, "John Doe", "john@x.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated account."""
    return register_and_login(client, "Jane Roe", "jane@x.com")


@pytest.fixture
def make_company(client):
    """Factory creating a company for the given headers through the API."""
    counter = itertools.count(1)

    def _make(headers, **overrides):
        n = next(counter)
        payload = {
            "cnpj": f"{n:014d}",
            "legal_name": f"Company {n} Ltda",
            "trade_name": f"Company {n}",
            "email": f"company{n}@example.com",
            "phone": f"+55 11 9000-{n:04d}",
            "address": f"Rua {n}, Sao Paulo",
            "size": "MEI",
        }
        payload.update(overrides)
        response = client.post("/api/v1/companies", headers=headers, json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def upload(client):
    """Upload a document to a company through the API; returns the response."""

    def _upload(headers, company_id, name="report.pdf", content=b"%PDF-1.4 test", mime=None):
        return client.post(
            "/api/v1/files",
            headers=headers,
            data={"company_id": str(company_id)},
            files={"file": (name, content, mime or "application/pdf")},
        )

    return _upload
