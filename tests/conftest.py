# /tests/conftest.py

import pytest
from unittest.mock import AsyncMock, MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.database import get_db
from app.main import app
from app.services import gemini_service
from app.services.database_service import DatabaseService


@pytest.fixture
def engine():
    """A fresh in-memory SQLite database per test. StaticPool keeps one shared connection."""
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def db_service(db_session):
    return DatabaseService(db_session=db_session)


@pytest.fixture
def stub_ai(mocker):
    """
    Replaces the process-wide Gemini client with a stub whose coroutines
    can be configured per test.
    """
    stub = MagicMock(spec=gemini_service.GeminiClient)
    stub.generate_text = AsyncMock(return_value="Hello there 👋")
    stub.generate_with_attachment = AsyncMock(return_value="Here is your summary 📚")
    mocker.patch.object(gemini_service, "_client", stub)
    return stub


@pytest.fixture
def client(session_factory):
    """A TestClient whose requests all run against the in-memory database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Entered without a `with` block so the lifespan (real DB + real key) never runs.
    yield TestClient(app)
    app.dependency_overrides.clear()
