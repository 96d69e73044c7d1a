"""Test suite for the singleton profile repository."""

from __future__ import annotations

import pytest

from portfolio_api.data.db import Database
from portfolio_api.data.models import Profile
from portfolio_api.errors import ValidationError
from portfolio_api.services.profile import ProfileRepository


@pytest.fixture
def repository(database: Database) -> ProfileRepository:
    return ProfileRepository(database)


def test_first_read_creates_default_once(repository: ProfileRepository) -> None:
    first = repository.get_or_create_singleton()
    second = repository.get_or_create_singleton()

    assert first["id"] == second["id"]
    assert repository.count() == 1
    assert set(first["social_links"]) == {"linkedin", "github", "whatsapp", "email", "twitter"}
    assert first["skills"]["languages"] == []
    assert first["stats"]["years_experience"] == 2


def test_upsert_creates_when_absent(repository: ProfileRepository) -> None:
    created = repository.upsert({"name": "Ada", "location": "London"})

    assert created["name"] == "Ada"
    assert created["location"] == "London"
    assert repository.count() == 1
    assert repository.get_or_create_singleton()["id"] == created["id"]


def test_upsert_replaces_in_place(repository: ProfileRepository) -> None:
    original = repository.get_or_create_singleton()

    updated = repository.upsert(
        {"bio": "New bio", "social_links": {"github": "https://github.com/ada"}}
    )

    assert updated["id"] == original["id"]
    assert updated["bio"] == "New bio"
    assert updated["name"] == original["name"]
    assert updated["social_links"] == {"github": "https://github.com/ada"}
    assert repository.count() == 1


def test_upsert_rejects_blank_name(repository: ProfileRepository) -> None:
    repository.get_or_create_singleton()

    with pytest.raises(ValidationError):
        repository.upsert({"name": "  "})


def test_duplicate_rows_resolve_to_oldest(
    repository: ProfileRepository, database: Database
) -> None:
    oldest = repository.get_or_create_singleton()
    with database.session() as session:
        session.add(Profile(name="Racer"))

    assert repository.get_or_create_singleton()["id"] == oldest["id"]
    assert repository.upsert({"bio": "x"})["id"] == oldest["id"]
