"""Tests for health endpoints, middleware and application lifecycle."""

import pytest
from fastapi.testclient import TestClient

from src.bookshelf.core.services import DbSessionService


def test_health_endpoint(client: TestClient):
    """Test that the health endpoint is working."""
    response = client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "bookshelf"


def test_readiness_endpoint(client: TestClient):
    response = client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["database"]["status"] == "healthy"
    assert data["checks"]["database"]["dialect"] == "sqlite"


def test_readiness_reports_unavailable_database(client: TestClient, monkeypatch):
    monkeypatch.setattr(DbSessionService, "health_check", lambda self: False)

    response = client.get("/health/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "not_ready"
    assert data["checks"]["database"]["status"] == "unhealthy"


def test_readiness_checks_the_request_database(
    client: TestClient, database_service: DbSessionService, monkeypatch
):
    """Readiness reports on the same database service the book handlers use."""
    monkeypatch.setattr(database_service, "health_check", lambda: False)

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.json()["checks"]["database"]["status"] == "unhealthy"


class TestMiddleware:
    def test_request_id_is_generated(self, client: TestClient):
        response = client.get("/health")

        assert response.headers.get("X-Request-ID")

    def test_request_id_is_propagated(self, client: TestClient):
        response = client.get("/books", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"

    def test_security_headers(self, client: TestClient):
        response = client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Strict-Transport-Security" not in response.headers


class TestApplicationStartup:
    """Test application startup and shutdown hooks."""

    @pytest.mark.asyncio
    async def test_startup_creates_tables(self):
        import src.bookshelf.api.http.app as application
        from src.bookshelf.runtime.config.config_data import ConfigData
        from src.bookshelf.runtime.context import with_context

        test_config = ConfigData()
        test_config.database.url = "sqlite://"

        with with_context(config_override=test_config):
            await application.startup()

        deps = application.app.state.app_dependencies
        try:
            assert deps.database_service.health_check() is True
            from sqlalchemy import inspect

            assert "book" in inspect(deps.database_service.engine).get_table_names()
        finally:
            await application.shutdown()
