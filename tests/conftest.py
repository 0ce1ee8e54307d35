"""
Pytest fixtures for the account service tests.

Each test gets its own SQLite database file with the user type rows seeded.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from app import main as app_main
from app.db.base import Base
from app.db.session import get_db
from app.models import User, UserTypeCode
from app.repositories import (
    JobSeekerProfileRepository,
    RecruiterProfileRepository,
    UserRepository,
    UsersTypeRepository,
)
from app.services import UsersService


@pytest.fixture(scope="function")
def test_db(tmp_path):
    """Create a fresh test database for each test."""
    db_url = f"sqlite:///{tmp_path / 'test.db'}"
    engine = create_engine(db_url, connect_args={"check_same_thread": False})

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    session = TestingSessionLocal()
    UsersTypeRepository(session).ensure_defaults()
    session.commit()
    session.close()

    yield db_url, TestingSessionLocal, engine

    engine.dispose()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    _, TestingSessionLocal, _ = test_db
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def users_service(test_session) -> UsersService:
    return UsersService(
        UserRepository(test_session),
        RecruiterProfileRepository(test_session),
        JobSeekerProfileRepository(test_session),
    )


@pytest.fixture
def make_user():
    """Factory for unsaved user drafts."""

    def _make_user(
        email: str = "someone@example.com",
        password: str = "s3cret-pass",
        user_type: int = UserTypeCode.JOB_SEEKER,
    ) -> User:
        return User(email=email, password=password, user_type_id=int(user_type))

    return _make_user


@pytest.fixture
def test_app_client(test_db, monkeypatch) -> Iterator[tuple[TestClient, sessionmaker]]:
    _, TestingSessionLocal, engine = test_db

    # Startup hooks must use the test database too
    monkeypatch.setattr(app_main, "engine", engine)
    monkeypatch.setattr(app_main, "SessionLocal", TestingSessionLocal)

    def override_get_db() -> Iterator[Session]:
        db = TestingSessionLocal()
        try:
            yield db
            db.commit()
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app_main.app.dependency_overrides[get_db] = override_get_db

    with TestClient(app_main.app) as client:
        yield client, TestingSessionLocal

    app_main.app.dependency_overrides.pop(get_db, None)
