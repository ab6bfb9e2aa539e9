from __future__ import annotations

from fastapi.testclient import TestClient

from party_api.app.core.config import Settings
from party_api.app.main import create_app

PREFLIGHT = {
    "Origin": "http://example.com",
    "Access-Control-Request-Method": "POST",
}


def test_should_allow_any_by_default(client):
    resp = client.options("/register", headers=PREFLIGHT)
    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "*"
    assert "POST" in resp.headers["Access-Control-Allow-Methods"]
    assert "GET" in resp.headers["Access-Control-Allow-Methods"]


def test_simple_request_carries_origin(client):
    resp = client.get("/visitors", headers={"Origin": "http://example.com"})
    assert resp.status_code == 200
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_should_allow_override_by_settings(db_path, store):
    settings = Settings(cors_origin="http://example.com", database_path=db_path)
    with TestClient(create_app(settings, store=store)) as c:
        resp = c.options("/register", headers=PREFLIGHT)
        assert resp.status_code == 200
        assert resp.headers["Access-Control-Allow-Origin"] == "http://example.com"

        other = c.options(
            "/register",
            headers={"Origin": "http://evil.example", "Access-Control-Request-Method": "POST"},
        )
        assert other.status_code == 400
