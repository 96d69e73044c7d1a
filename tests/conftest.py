from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from portfolio_api.api.main import create_app
from portfolio_api.config import Settings
from portfolio_api.data.db import Database

ADMIN_USERNAME = "admin"
ADMIN_EMAIL = "admin@portfolio.dev"
ADMIN_PASSWORD = "secret123"


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings pointing at a temporary SQLite DB."""
    db_path = tmp_path / "api.db"
    return Settings(
        database_url=f"sqlite:///{db_path.as_posix()}",
        jwt_secret="test-secret-0123456789abcdefghijkl",
        environment="test",
    )


@pytest.fixture
def database(settings: Settings) -> Iterator[Database]:
    """An open storage handle on the temporary DB."""
    db = Database(settings.database_url)
    db.open()
    yield db
    # Dispose engine to release connections
    db.close()


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """Test client with the application lifespan running."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_headers(client: TestClient) -> dict[str, str]:
    """Bootstrap the admin account and return its bearer header."""
    response = client.post(
        "/api/auth/setup",
        json={"username": ADMIN_USERNAME, "email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 201

    response = client.post(
        "/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    token = response.json()["data"]["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def editor_headers(client: TestClient) -> dict[str, str]:
    """Bearer header for a valid token whose role is not admin."""
    token = client.app.state.tokens.issue("editor-id", "editor")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_account() -> dict[str, str]:
    """Credentials used by ``admin_headers``."""
    return {"username": ADMIN_USERNAME, "email": ADMIN_EMAIL, "password": ADMIN_PASSWORD}
