"""Tests for application wiring: health, unknown routes, error envelope."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from portfolio_api.api.main import create_app
from portfolio_api.config import Settings
from portfolio_api.errors import ConfigurationError


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_liveness_and_timestamp(self, client: TestClient) -> None:
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert "timestamp" in data

    def test_health_response_is_json(self, client: TestClient) -> None:
        response = client.get("/api/health")
        assert response.headers["content-type"] == "application/json"


class TestAppConfiguration:
    """Tests for the FastAPI app configuration."""

    def test_app_title(self, settings: Settings) -> None:
        assert create_app(settings).title == "Portfolio API"

    def test_cors_middleware_is_configured(self, settings: Settings) -> None:
        app = create_app(settings)
        middleware_classes = [m.cls.__name__ for m in app.user_middleware]
        assert "CORSMiddleware" in middleware_classes

    def test_log_level_applied_to_package_loggers(self, settings: Settings) -> None:
        package_logger = logging.getLogger("portfolio_api")
        previous = package_logger.level
        try:
            create_app(replace(settings, log_level="DEBUG"))
            assert package_logger.level == logging.DEBUG
        finally:
            package_logger.setLevel(previous)

    def test_missing_database_url_is_fatal_at_startup(self) -> None:
        app = create_app(Settings(database_url=None, jwt_secret="x" * 32))

        with pytest.raises(ConfigurationError):
            with TestClient(app):
                pass

    def test_production_without_secret_refuses_to_start(self, tmp_path: Path) -> None:
        settings = Settings(
            database_url=f"sqlite:///{(tmp_path / 'p.db').as_posix()}",
            environment="production",
        )

        with pytest.raises(ConfigurationError):
            with TestClient(create_app(settings)):
                pass


class TestInvalidRoutes:
    """Tests for handling invalid routes."""

    def test_unknown_route_returns_404_envelope(self, client: TestClient) -> None:
        response = client.get("/api/nonexistent")

        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Ruta no encontrada"}

    def test_unknown_root_route(self, client: TestClient) -> None:
        assert client.get("/nope").status_code == 404


def _app_with_failing_route(settings: Settings) -> FastAPI:
    app = create_app(settings)

    @app.get("/api/boom")
    def boom() -> None:
        raise RuntimeError("kaboom")

    return app


class TestUnexpectedErrors:
    """Uncaught errors become a generic 500 envelope."""

    def test_detail_included_outside_production(self, settings: Settings) -> None:
        app = _app_with_failing_route(settings)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/boom")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Error interno del servidor"
        assert body["error"] == "kaboom"

    def test_detail_hidden_in_production(self, settings: Settings) -> None:
        production = Settings(
            database_url=settings.database_url,
            jwt_secret=settings.jwt_secret,
            environment="production",
        )
        app = _app_with_failing_route(production)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/api/boom")

        assert response.status_code == 500
        assert "error" not in response.json()
