# tests/conftest.py

from __future__ import annotations

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from taskboard.core.config import Settings
from taskboard.db import crud
from taskboard.db.models import Task, TaskStatus, User
from taskboard.db.session import build_engine, init_db
from taskboard.main import create_app


@pytest.fixture()
def settings() -> Settings:
    # The sweep is driven explicitly in tests, never by the lifespan timer.
    return Settings(DATABASE_URL="sqlite://", RECONCILE_ENABLED=False)


@pytest.fixture()
def engine(settings: Settings):
    """Fresh in-memory database per test."""
    eng = build_engine(settings.DATABASE_URL)
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def client(settings: Settings, engine) -> TestClient:
    app = create_app(settings, engine)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def make_user(engine):
    counter = {"n": 0}

    def _make(username: str | None = None) -> User:
        counter["n"] += 1
        with Session(engine) as session:
            return crud.create_user(
                session,
                User(
                    username=username or f"user{counter['n']}",
                    first_name="John",
                    last_name="Smith",
                ),
            )

    return _make


@pytest.fixture()
def make_task(engine):
    def _make(
        user_id: int,
        *,
        name: str = "My task",
        next_execute_date_time: datetime | None = None,
        status: TaskStatus = TaskStatus.PENDING,
    ) -> Task:
        with Session(engine) as session:
            return crud.create_task(
                session,
                Task(
                    user_id=user_id,
                    name=name,
                    description="Description of task",
                    date_time=datetime(2016, 5, 25, 14, 25),
                    status=status,
                    next_execute_date_time=next_execute_date_time or datetime(2016, 5, 25, 14, 25),
                ),
            )

    return _make


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2026, 1, 15, 12, 0, 0)
