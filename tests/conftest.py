"""Pytest configuration and fixtures."""

import os
import secrets
import tempfile
from pathlib import Path

import pytest

# Environment must be in place before spacetime.config is imported
_TEST_TMP = tempfile.mkdtemp(prefix="spacetime-tests-")
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = f"test-only-{secrets.token_urlsafe(32)}"
os.environ["AUTH_ENABLED"] = "true"
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_TMP, "uploads")
os.environ["LOG_FILE"] = os.path.join(_TEST_TMP, "spacetime.log")

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from spacetime.auth import create_access_token  # noqa: E402
from spacetime.config import settings  # noqa: E402
from spacetime.database import Base, get_db  # noqa: E402
from spacetime.main import app  # noqa: E402

OWNER_ID = "usr_owner_000001"
OTHER_ID = "usr_other_000002"


@pytest.fixture
def db_session():
    """In-memory SQLite session shared by the app and the test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()

    def _get_test_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield session

    app.dependency_overrides.pop(get_db, None)
    session.close()
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def client(db_session):
    """Create a test client."""
    return TestClient(app)


@pytest.fixture
def open_mode(monkeypatch):
    """Run the memories routes without authentication."""
    monkeypatch.setattr(settings, "AUTH_ENABLED", False)


@pytest.fixture
def upload_dir():
    path = Path(settings.UPLOAD_DIR)
    path.mkdir(parents=True, exist_ok=True)
    yield path
    for stored in path.iterdir():
        stored.unlink()


def _headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def auth_headers():
    """Auth headers for the memory owner."""
    return _headers(OWNER_ID)


@pytest.fixture
def other_headers():
    """Auth headers for a second, unrelated user."""
    return _headers(OTHER_ID)
