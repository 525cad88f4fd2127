"""Pytest fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker

from quicksos.core.deps import ApiSession, get_api_session
from quicksos.db.base import Base
from quicksos.db.session import get_db
from quicksos.main import app
from quicksos.models import KvEntry

TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="session")
def setup_db():
    """Create tables once for test session."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(setup_db):
    """Session on an emptied kv_entries table."""
    db = TestingSessionLocal()
    db.execute(delete(KvEntry))
    db.commit()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def api_session():
    return ApiSession()


@pytest.fixture
def client(db_session, api_session):
    """Test client with overridden DB and a fresh SOS session."""
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_api_session] = lambda: api_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def session_factory(setup_db):
    """Open extra sessions on the test database."""
    return TestingSessionLocal
