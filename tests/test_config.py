# tests/test_config.py

from __future__ import annotations

from taskboard.api.deps import paginate, parse_id
from taskboard.core.config import Settings
from taskboard.core.errors import ResourceNotFoundError

import pytest


def test_development_defaults(monkeypatch) -> None:
    for name in ("PORT", "BASE_URL", "DATABASE_URL", "RECONCILE_INTERVAL_MINUTES"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.PORT == 3000
    assert s.BASE_URL == "http://localhost:3000"
    assert s.DATABASE_URL.startswith("sqlite:///")
    assert s.RECONCILE_INTERVAL_MINUTES == 30


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./elsewhere.db")
    monkeypatch.setenv("RECONCILE_ENABLED", "false")

    s = Settings(_env_file=None)

    assert s.PORT == 8080
    assert s.DATABASE_URL == "sqlite:///./elsewhere.db"
    assert s.RECONCILE_ENABLED is False


@pytest.mark.parametrize(
    "limit,page,expected",
    [
        (100, 1, (100, 0)),
        (1, 2, (1, 1)),
        (10, 3, (10, 20)),
        (0, 0, (100, 0)),
        (-5, -2, (5, 5)),
    ],
)
def test_paginate(limit, page, expected) -> None:
    assert paginate(limit, page) == expected


@pytest.mark.parametrize("raw", ["iiii", "", "0", "-1", "1.5", "٣", "99999999999999999999", "9223372036854775808"])
def test_parse_id_rejects_non_keys(raw) -> None:
    with pytest.raises(ResourceNotFoundError):
        parse_id(raw, "User not found.")


def test_parse_id_accepts_positive_integers() -> None:
    assert parse_id("42", "User not found.") == 42


def test_parse_id_accepts_largest_key() -> None:
    assert parse_id("9223372036854775807", "User not found.") == 2**63 - 1


def test_app_creates_tables_on_startup(settings) -> None:
    from fastapi.testclient import TestClient
    from sqlalchemy import inspect

    from taskboard.db.session import build_engine
    from taskboard.main import create_app

    engine = build_engine(settings.DATABASE_URL)
    assert not inspect(engine).has_table("task")

    with TestClient(create_app(settings, engine)) as c:
        assert c.post("/api/users", json={"username": "jsmith", "first_name": "John", "last_name": "Smith"}).status_code == 201

    assert inspect(engine).has_table("task")
    engine.dispose()


def test_importing_main_builds_no_app() -> None:
    from taskboard import main

    assert not hasattr(main, "app")
