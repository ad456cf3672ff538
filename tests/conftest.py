"""Shared fixtures: a recording stand-in for `core.db` and an HTTP test client."""

from __future__ import annotations

from typing import Any

import pytest

from core import db


class FakeDb:
    """Records every statement and returns canned results."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, tuple[Any, ...]]] = []
        self.one: dict[str, Any] | None = None
        self.all: list[dict[str, Any]] = []
        self.val: Any = None

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        self.calls.append(("one", sql, args))
        return self.one

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        self.calls.append(("all", sql, args))
        return self.all

    async def fetch_val(self, sql: str, *args: Any) -> Any:
        self.calls.append(("val", sql, args))
        return self.val

    @property
    def last_sql(self) -> str:
        return " ".join(self.calls[-1][1].split())

    @property
    def last_args(self) -> tuple[Any, ...]:
        return self.calls[-1][2]


@pytest.fixture()
def fake_db(monkeypatch) -> FakeDb:
    fake = FakeDb()
    monkeypatch.setattr(db, "fetch_one", fake.fetch_one)
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    monkeypatch.setattr(db, "fetch_val", fake.fetch_val)
    return fake


@pytest.fixture()
def client():
    # Lifespan is not entered without a `with` block, so no pool is created.
    from fastapi.testclient import TestClient
    from main import app
    return TestClient(app)
