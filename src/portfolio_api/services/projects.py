"""Project repository: showcased portfolio projects."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Query

from portfolio_api.data.models import PROJECT_CATEGORIES, PROJECT_STATUSES, Project
from portfolio_api.errors import FieldError
from portfolio_api.services.repository import Repository, RequiredField

__all__ = ["ProjectRepository"]


class ProjectRepository(Repository[Project]):
    """CRUD for projects.

    Listing order is featured first, then ``order`` ascending, then newest
    first. ``list_all`` accepts ``category`` and ``featured`` filters.
    """

    model = Project
    label = "project"
    not_found_message = "Proyecto no encontrado"
    fields = (
        "title",
        "description",
        "long_description",
        "image",
        "images",
        "technologies",
        "category",
        "github_url",
        "live_url",
        "featured",
        "status",
        "order",
        "highlights",
        "challenges",
    )
    required = (
        RequiredField("title", "title", "El título es requerido"),
        RequiredField("description", "description", "La descripción es requerida"),
        RequiredField("image", "image", "La imagen es requerida"),
        RequiredField("technologies", "technologies", "Se requiere al menos una tecnología"),
    )
    choices = {
        "category": ("category", PROJECT_CATEGORIES),
        "status": ("status", PROJECT_STATUSES),
    }

    def _ordering(self) -> list[Any]:
        return [Project.featured.desc(), Project.order.asc(), Project.created_at.desc()]

    def _apply_filters(self, query: Query, filters: Mapping[str, Any]) -> Query:
        category = filters.get("category")
        if category:
            query = query.filter(Project.category == category)
        featured = filters.get("featured")
        if featured is not None:
            query = query.filter(Project.featured.is_(featured))
        return query

    def _validate(self, data: Mapping[str, Any]) -> list[FieldError]:
        errors = super()._validate(data)
        technologies = data.get("technologies") or []
        if any(not isinstance(t, str) or not t.strip() for t in technologies):
            errors.append(
                {"field": "technologies", "message": "Las tecnologías no pueden estar vacías"}
            )
        return errors
