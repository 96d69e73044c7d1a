"""Tests for the profile endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient


def test_get_profile_creates_default_once(client: TestClient) -> None:
    first = client.get("/api/profile")
    second = client.get("/api/profile")

    assert first.status_code == 200
    data = first.json()["data"]
    assert data["id"] == second.json()["data"]["id"]
    assert set(data["socialLinks"]) == {"linkedin", "github", "whatsapp", "email", "twitter"}
    assert data["stats"]["yearsExperience"] == 2
    assert "profileImage" in data


def test_update_requires_token(client: TestClient) -> None:
    response = client.put("/api/profile", json={"name": "Ada"})

    assert response.status_code == 401


def test_update_requires_admin_role(client: TestClient, editor_headers: dict) -> None:
    response = client.put("/api/profile", json={"name": "Ada"}, headers=editor_headers)

    assert response.status_code == 403
    assert response.json()["success"] is False


def test_update_partial_fields(client: TestClient, admin_headers: dict) -> None:
    original = client.get("/api/profile").json()["data"]

    response = client.put(
        "/api/profile",
        json={
            "bio": "Security-minded developer",
            "socialLinks": {"github": "https://github.com/ada"},
            "stats": {"yearsExperience": 5},
        },
        headers=admin_headers,
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["id"] == original["id"]
    assert data["bio"] == "Security-minded developer"
    assert data["name"] == original["name"]
    assert data["socialLinks"]["github"] == "https://github.com/ada"
    assert data["socialLinks"]["linkedin"] == ""
    assert data["stats"] == {"yearsExperience": 5, "projectsCompleted": 0, "certifications": 0}


def test_update_before_first_read_upserts(client: TestClient, admin_headers: dict) -> None:
    response = client.put(
        "/api/profile",
        json={"name": "Ada", "skills": {"languages": ["Python", "Go"]}},
        headers=admin_headers,
    )

    assert response.status_code == 200
    created = response.json()["data"]
    assert created["skills"]["languages"] == ["Python", "Go"]
    assert created["skills"]["tools"] == []
    assert client.get("/api/profile").json()["data"]["id"] == created["id"]


def test_update_rejects_blank_name(client: TestClient, admin_headers: dict) -> None:
    response = client.put("/api/profile", json={"name": " "}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "name"
