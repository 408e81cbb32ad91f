"""Pytest configuration and shared fixtures."""

from unittest.mock import create_autospec

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db, get_notifier
from app.db.init_db import init_db
from app.main import app
from app.models.user import User
from app.repositories.user_repository import SqlAlchemyUserRepository
from app.services.email_service import LoggingEmailService
from app.services.interfaces import Notifier, UserStore, UserValidator
from app.services.user_service import UserService


# ----------------------------------------------------
# Sample users
# ----------------------------------------------------
@pytest.fixture
def test_user() -> User:
    return User(id=1, email="test@example.com", name="Test User", active=True)


@pytest.fixture
def active_user() -> User:
    return User(id=2, email="active@example.com", name="Active User", active=True)


@pytest.fixture
def inactive_user() -> User:
    return User(id=3, email="inactive@example.com", name="Inactive User", active=False)


# ----------------------------------------------------
# Mocked collaborators
# ----------------------------------------------------
@pytest.fixture
def user_store():
    return create_autospec(UserStore, instance=True)


@pytest.fixture
def notifier():
    return create_autospec(Notifier, instance=True)


@pytest.fixture
def validator():
    return create_autospec(UserValidator, instance=True)


@pytest.fixture
def user_service(user_store, notifier, validator) -> UserService:
    return UserService(user_store, notifier, validator)


# ----------------------------------------------------
# In-memory database
# ----------------------------------------------------
@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(db_session) -> SqlAlchemyUserRepository:
    return SqlAlchemyUserRepository(db_session)


# ----------------------------------------------------
# API client
# ----------------------------------------------------
@pytest.fixture
def outbox() -> LoggingEmailService:
    return LoggingEmailService(sender="tests@example.com")


@pytest.fixture
def client(engine, outbox):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: outbox

    # Not used as a context manager: the lifespan would create tables on
    # the configured DATABASE_URL instead of the in-memory engine.
    yield TestClient(app)

    app.dependency_overrides.clear()
