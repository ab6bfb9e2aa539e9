"""
Shared fixtures: an application over a temporary SQLite file with a
pinned clock, and helpers to talk to it.
"""
from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from party_api.app.core.config import Settings
from party_api.app.main import create_app
from party_api.app.services.visitor_store import VisitorStore

API_KEY = "key"
NOW = datetime(2024, 3, 29, 18, 30, 0, tzinfo=timezone.utc)
NOW_ISO = "2024-03-29T18:30:00.000000Z"


@pytest.fixture()
def db_path(tmp_path):
    return str(tmp_path / "party.db")


@pytest.fixture()
def settings(db_path):
    return Settings(api_key=API_KEY, database_path=db_path)


@pytest.fixture()
def store(db_path):
    visitor_store = VisitorStore(db_path, clock=lambda: NOW)
    visitor_store.init_schema()
    return visitor_store


@pytest.fixture()
def client(settings, store):
    app = create_app(settings, store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def admin_headers():
    return {"Authorization": f"Bearer {API_KEY}"}


@pytest.fixture()
def add_visitor(store):
    """Insert a visitor directly through the store and return its id."""

    def _add(nick: str, group: str | None = None, **fields) -> int:
        return store.create(nick, group, ip="127.0.0.1:8080", **fields)

    return _add
