"""Test suite for the project repository."""

from __future__ import annotations

import pytest
from sqlalchemy import text

from portfolio_api.data.db import Database
from portfolio_api.errors import StorageError, ValidationError
from portfolio_api.services.projects import ProjectRepository


@pytest.fixture
def repository(database: Database) -> ProjectRepository:
    return ProjectRepository(database)


def _project(title: str, **extra) -> dict:
    return {
        "title": title,
        "description": f"{title} description",
        "image": f"{title}.png",
        "technologies": ["Go"],
        **extra,
    }


def test_list_sorts_featured_then_order_then_newest(repository: ProjectRepository) -> None:
    repository.create(_project("old-plain", order=0))
    repository.create(_project("featured-second", featured=True, order=2))
    repository.create(_project("new-plain", order=0))
    repository.create(_project("featured-first", featured=True, order=1))
    repository.create(_project("plain-late", order=3))

    titles = [p["title"] for p in repository.list_all()]

    assert titles == ["featured-first", "featured-second", "new-plain", "old-plain", "plain-late"]


def test_filter_by_featured(repository: ProjectRepository) -> None:
    repository.create(_project("a", featured=True, order=3))
    repository.create(_project("b"))
    repository.create(_project("c", featured=True, order=1))

    featured = repository.list_all(featured=True)
    not_featured = repository.list_all(featured=False)

    assert [p["title"] for p in featured] == ["c", "a"]
    assert [p["title"] for p in not_featured] == ["b"]


def test_filter_by_category(repository: ProjectRepository) -> None:
    repository.create(_project("api", category="backend"))
    repository.create(_project("scanner", category="security"))

    assert [p["title"] for p in repository.list_all(category="security")] == ["scanner"]
    assert len(repository.list_all(category=None)) == 2


def test_defaults_applied(repository: ProjectRepository) -> None:
    created = repository.create(_project("x"))

    assert created["category"] == "fullstack"
    assert created["status"] == "completed"
    assert created["featured"] is False
    assert created["images"] == []
    assert created["order"] == 0


def test_title_is_trimmed(repository: ProjectRepository) -> None:
    assert repository.create(_project("  padded  "))["title"] == "padded"


def test_rejects_blank_technology(repository: ProjectRepository) -> None:
    with pytest.raises(ValidationError) as excinfo:
        repository.create(_project("x", technologies=["Go", " "]))

    assert excinfo.value.errors[0]["field"] == "technologies"
    assert repository.count() == 0


def test_rejects_unknown_category(repository: ProjectRepository) -> None:
    with pytest.raises(ValidationError) as excinfo:
        repository.create(_project("x", category="games"))

    assert excinfo.value.errors[0]["field"] == "category"


def test_missing_fields_reported_together(repository: ProjectRepository) -> None:
    with pytest.raises(ValidationError) as excinfo:
        repository.create({"title": "only a title"})

    assert [e["field"] for e in excinfo.value.errors] == ["description", "image", "technologies"]


def test_missing_table_raises_storage_error(
    repository: ProjectRepository, database: Database
) -> None:
    with database.engine.begin() as connection:
        connection.execute(text("DROP TABLE projects"))

    with pytest.raises(StorageError) as exc_info:
        repository.list_all()

    assert exc_info.value.status_code == 503
    assert exc_info.value.message == "Base de datos no disponible"
