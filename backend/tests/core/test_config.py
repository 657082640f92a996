"""Tests for core.config.Settings."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings

_REQUIRED = {
    "DB_USER": "app",
    "DB_PASS": "secret",
    "DB_HOST": "localhost",
    "DB_PORT": "3306",
    "DB_NAME": "users",
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _REQUIRED:
        monkeypatch.delenv(name, raising=False)


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name, value in _REQUIRED.items():
        monkeypatch.setenv(name, value)
    s = Settings(_env_file=None)  # type: ignore[call-arg]
    assert s.DB_PORT == 3306
    assert s.DB_MAX_OPEN_CONNS == 25
    assert s.DB_MAX_IDLE_CONNS == 25
    assert s.DB_CONN_MAX_LIFETIME == 300
    url = s.database_url
    assert url.drivername == "mysql+pymysql"
    assert url.host == "localhost"
    assert url.database == "users"
    assert url.query["charset"] == "utf8mb4"


@pytest.mark.parametrize("missing", sorted(_REQUIRED))
def test_settings_missing_value_is_fatal(
    monkeypatch: pytest.MonkeyPatch, missing: str
) -> None:
    for name, value in _REQUIRED.items():
        if name != missing:
            monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError) as exc_info:
        Settings(_env_file=None)  # type: ignore[call-arg]
    assert missing in str(exc_info.value)


def test_settings_empty_value_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    for name, value in _REQUIRED.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv("DB_HOST", "")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)  # type: ignore[call-arg]


def test_settings_idle_above_open_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    for name, value in _REQUIRED.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv("DB_MAX_OPEN_CONNS", "5")
    monkeypatch.setenv("DB_MAX_IDLE_CONNS", "10")
    with pytest.raises(ValidationError, match="DB_MAX_IDLE_CONNS"):
        Settings(_env_file=None)  # type: ignore[call-arg]


def test_all_cors_origins(monkeypatch: pytest.MonkeyPatch) -> None:
    for name, value in _REQUIRED.items():
        monkeypatch.setenv(name, value)
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", "http://localhost:3000/, https://example.com")
    s = Settings(_env_file=None)  # type: ignore[call-arg]
    assert s.all_cors_origins == ["http://localhost:3000", "https://example.com"]
