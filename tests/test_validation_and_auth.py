from __future__ import annotations

import pytest

from party_api.app.core.config import Settings
from party_api.app.core.errors import ValidationError
from party_api.app.core.security import authorize
from party_api.app.schemas.visitor import validate_registration


def test_validate_registration_keeps_fields_as_sent():
    visitor = validate_registration({"nick": "  Lorem ", "group": "Ipsum", "ignored": True})
    assert visitor.nick == "  Lorem "
    assert visitor.group == "Ipsum"
    assert visitor.email is None
    assert visitor.extra is None


def test_validate_registration_accepts_explicit_nulls():
    visitor = validate_registration({"nick": "Lorem", "group": None, "email": None, "extra": None})
    assert visitor.group is None


@pytest.mark.parametrize(
    "data",
    [
        None,
        [],
        "Lorem",
        {},
        {"nick": ""},
        {"nick": " \t\n"},
        {"nick": 1},
        {"nick": "Lorem", "email": 5},
        {"nick": "Lorem", "group": {"name": "Ipsum"}},
        {"nick": "\ud800"},
        {"nick": "Lorem", "email": "x\udc80@example.com"},
    ],
)
def test_validate_registration_rejects(data):
    with pytest.raises(ValidationError):
        validate_registration(data)


def test_authorize():
    assert authorize("key", "key") is True
    assert authorize("Key", "key") is False
    assert authorize("key ", "key") is False
    assert authorize(None, "key") is False
    assert authorize("", "key") is False


def test_authorize_without_configured_key():
    assert authorize("anything", None) is False
    assert authorize("", "") is False
    assert authorize(None, None) is False


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("API_KEY", "secret")
    monkeypatch.setenv("CORS_ORIGIN", "http://example.com")
    monkeypatch.setenv("SQLITE_DB", "/tmp/party.db")
    monkeypatch.setenv("LISTEN_ADDR", "0.0.0.0:8080")
    settings = Settings.from_env()
    assert settings.api_key == "secret"
    assert settings.cors_origin == "http://example.com"
    assert settings.database_path == "/tmp/party.db"
    assert (settings.host, settings.port) == ("0.0.0.0", 8080)


def test_settings_defaults(monkeypatch):
    for name in ("API_KEY", "CORS_ORIGIN", "SQLITE_DB", "LISTEN_ADDR"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.api_key is None
    assert settings.cors_origin == "*"
    assert settings.database_path == "data.db"
    assert (settings.host, settings.port) == ("127.0.0.1", 3000)


def test_empty_api_key_counts_as_unset(monkeypatch):
    monkeypatch.setenv("API_KEY", "")
    assert Settings.from_env().api_key is None


def test_listen_addr_ipv6():
    settings = Settings(listen_addr="[::1]:3000")
    assert (settings.host, settings.port) == ("::1", 3000)


@pytest.mark.parametrize("addr", ["localhost", ":3000", "localhost:http"])
def test_bad_listen_addr(addr):
    with pytest.raises(ValueError):
        Settings(listen_addr=addr).port
