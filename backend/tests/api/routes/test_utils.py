"""Tests for the /health probe."""

from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.core.db import Database


def test_health_check_returns_200_when_store_reachable(client: TestClient) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "OK"}


def test_health_check_returns_503_when_ping_fails(client: TestClient) -> None:
    with patch.object(
        Database,
        "ping",
        side_effect=OperationalError("SELECT 1", {}, Exception("connection refused")),
    ):
        r = client.get("/health")
    assert r.status_code == 503
    assert r.json() == {"status": "DB_UNAVAILABLE"}


def test_health_check_recovers_after_outage(client: TestClient) -> None:
    with patch.object(Database, "is_alive", return_value=False):
        assert client.get("/health").status_code == 503
    assert client.get("/health").json() == {"status": "OK"}
