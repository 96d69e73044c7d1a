"""Tests for the experience, education and certification endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

RESOURCES = {
    "experiences": {
        "title": "Backend Developer",
        "company": "Acme",
        "startDate": "2022-03",
        "description": "Built APIs",
    },
    "education": {
        "degree": "BSc Computer Science",
        "institution": "UBA",
        "startDate": "2018-03",
    },
    "certifications": {
        "name": "Security+",
        "issuer": "CompTIA",
        "issueDate": "2023-06",
    },
}


@pytest.mark.parametrize(("resource", "payload"), RESOURCES.items())
def test_crud_cycle(client: TestClient, admin_headers: dict, resource: str, payload: dict) -> None:
    created = client.post(f"/api/{resource}", json=payload, headers=admin_headers)
    assert created.status_code == 201
    record = created.json()["data"]
    for key, value in payload.items():
        assert record[key] == value
    assert record["order"] == 0

    listing = client.get(f"/api/{resource}").json()
    assert listing["count"] == 1
    assert client.get(f"/api/{resource}/{record['id']}").json()["data"]["id"] == record["id"]

    updated = client.put(
        f"/api/{resource}/{record['id']}", json={"order": 3}, headers=admin_headers
    )
    assert updated.status_code == 200
    assert updated.json()["data"]["order"] == 3

    deleted = client.delete(f"/api/{resource}/{record['id']}", headers=admin_headers)
    assert deleted.status_code == 200
    assert deleted.json()["success"] is True
    assert client.get(f"/api/{resource}").json()["count"] == 0


@pytest.mark.parametrize(("resource", "payload"), RESOURCES.items())
def test_mutations_need_authentication_only(
    client: TestClient, editor_headers: dict, resource: str, payload: dict
) -> None:
    assert client.post(f"/api/{resource}", json=payload).status_code == 401

    response = client.post(f"/api/{resource}", json=payload, headers=editor_headers)
    assert response.status_code == 201


@pytest.mark.parametrize("resource", RESOURCES)
def test_unknown_id(client: TestClient, admin_headers: dict, resource: str) -> None:
    missing = f"/api/{resource}/{'f' * 32}"

    assert client.get(missing).status_code == 404
    assert client.put(missing, json={"order": 1}, headers=admin_headers).status_code == 404
    assert client.delete(missing, headers=admin_headers).status_code == 404


def test_certification_without_issue_date(client: TestClient, admin_headers: dict) -> None:
    payload = {"name": "Security+", "issuer": "CompTIA"}

    response = client.post("/api/certifications", json=payload, headers=admin_headers)

    assert response.status_code == 400
    assert "issueDate" in [e["field"] for e in response.json()["errors"]]
    assert client.get("/api/certifications").json()["count"] == 0


def test_certification_active_flag(client: TestClient, admin_headers: dict) -> None:
    expired = {**RESOURCES["certifications"], "expiryDate": "2001-01-01"}

    data = client.post("/api/certifications", json=expired, headers=admin_headers).json()["data"]

    assert data["active"] is False
    assert data["expiryDate"] == "2001-01-01"


def test_experiences_listed_newest_first(client: TestClient, admin_headers: dict) -> None:
    for start in ("2018-01", "2024-02", "2021-07"):
        client.post(
            "/api/experiences",
            json={**RESOURCES["experiences"], "startDate": start},
            headers=admin_headers,
        )

    data = client.get("/api/experiences").json()["data"]

    assert [e["startDate"] for e in data] == ["2024-02", "2021-07", "2018-01"]
    assert data[0]["endDate"] == "Present"


def test_education_rejects_bad_status(client: TestClient, admin_headers: dict) -> None:
    response = client.post(
        "/api/education",
        json={**RESOURCES["education"], "status": "dropped"},
        headers=admin_headers,
    )

    assert response.status_code == 400
