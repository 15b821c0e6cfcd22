"""Pytest configuration and fixtures."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from consultas.api import create_app
from consultas.data.database import Base, build_engine, get_db
from consultas.data.seed import seed
import consultas.data.models  # noqa: F401


def _session_factory(with_tables=True):
    engine = build_engine("sqlite://")
    if with_tables:
        Base.metadata.create_all(engine)
    return engine, sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def empty_session():
    """In-memory database with tables but no rows."""
    engine, SessionLocal = _session_factory()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def session(empty_session):
    """In-memory database with the sample usuarios and pedidos."""
    seed(empty_session)
    return empty_session


def _client_for(db_session):
    app = create_app()

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def client(session):
    return _client_for(session)


@pytest.fixture
def empty_client(empty_session):
    return _client_for(empty_session)


@pytest.fixture
def broken_client():
    """Client whose database has no tables, so every query fails."""
    engine, SessionLocal = _session_factory(with_tables=False)
    session = SessionLocal()
    try:
        yield _client_for(session)
    finally:
        session.close()
        engine.dispose()
