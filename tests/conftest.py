# tests/conftest.py

from __future__ import annotations

import os

# Settings are read once at import time; pin them before planner is imported.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("SCHEDULER_ENABLED", "false")
os.environ.setdefault("ENVIRONMENT", "test")

from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from planner.infrastructure.database import Base, build_engine, get_db
from planner.main import app


@pytest.fixture()
def engine(tmp_path: Path) -> Iterator[Engine]:
    """A fresh SQLite file per test, with the full schema."""
    test_engine = build_engine(f"sqlite:///{tmp_path / 'planner.sqlite3'}")
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def make_client(session_factory: sessionmaker) -> Iterator[Callable[..., TestClient]]:
    """
    Factory for TestClients sharing one database.

    Each client has its own cookie jar, so two clients behave like two
    separate browsers (two users). The lifespan is not entered: no scheduler,
    no create_all against the configured DATABASE_URL.
    """

    def override_get_db() -> Iterator[Session]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db

    def _make(**kwargs) -> TestClient:
        return TestClient(app, **kwargs)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture()
def client(make_client: Callable[..., TestClient]) -> TestClient:
    return make_client()

