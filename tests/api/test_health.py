"""Test suite for the health router."""

from unittest.mock import AsyncMock

from sqlalchemy.exc import OperationalError

from coursehub.boundary.db import get_async_db


def test_health_check(client) -> None:
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_db_health_check(client) -> None:
    db = AsyncMock()
    client.app.dependency_overrides[get_async_db] = lambda: db

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    db.execute.assert_awaited_once()


def test_db_health_check_unreachable(client) -> None:
    db = AsyncMock()
    db.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
    client.app.dependency_overrides[get_async_db] = lambda: db

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
