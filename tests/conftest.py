# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Session

from task_tracker.db.config import build_engine, get_session
from task_tracker.db.init import init_db
from task_tracker.main import app
from task_tracker.services.identity_service import JWTIdentityProvider, get_identity_provider
from task_tracker.services.task_service import TaskService

from .jwt_helpers import TEST_SECRET, make_token


@pytest.fixture()
def engine(tmp_path: Path) -> Iterator[Engine]:
    """A fresh SQLite database file per test."""
    engine = build_engine(f"sqlite:///{tmp_path / 'tasks.db'}")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture()
def service(session: Session) -> TaskService:
    return TaskService(session)


@pytest.fixture()
def client(engine: Engine) -> Iterator[TestClient]:
    """
    TestClient wired to the per-test database and a JWT provider using TEST_SECRET.

    The app lifespan is not run (no context manager), so the default
    database configured for the process is never touched.
    """

    def override_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_identity_provider] = lambda: JWTIdentityProvider(TEST_SECRET)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers() -> Callable[[str], Dict[str, str]]:
    def _headers(owner_id: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {make_token(owner_id)}"}

    return _headers
