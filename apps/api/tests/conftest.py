"""
Pytest configuration and fixtures

Tests run against a throwaway SQLite database. The schema is dropped and
recreated around every test, so nothing leaks between tests.
"""
import os
import sys
import tempfile
from uuid import uuid4

import pytest

# Settings are read at import time: configure the environment first.
_DB_DIR = tempfile.mkdtemp(prefix="bmi_coach_tests_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters-long")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Add the parent directory to the path so we can import from services
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from core.database import Base, SessionLocal, engine
from core.security import create_user_token
import models  # noqa: F401  (registers tables)
from services.user_service import create_user

TEST_PASSWORD = "s3cret-pass"


@pytest.fixture(autouse=True)
def _fresh_schema():
    """Recreate every table so each test starts from an empty database."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db_session():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_user(db_session):
    """Factory creating committed users: make_user(role="admin", email=...)."""
    def _make(email=None, password=TEST_PASSWORD, name="Test User", role="user"):
        user = create_user(
            db_session,
            email=email or f"test_{uuid4().hex[:8]}@example.com",
            password=password,
            name=name,
            role=role,
        )
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def auth_headers():
    def _headers(user):
        return {"Authorization": f"Bearer {create_user_token(user)}"}

    return _headers
