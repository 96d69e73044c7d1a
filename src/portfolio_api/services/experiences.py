"""Experience repository: work history entries."""

from __future__ import annotations

from typing import Any

from portfolio_api.data.models import EXPERIENCE_TYPES, Experience
from portfolio_api.services.repository import Repository, RequiredField

__all__ = ["ExperienceRepository"]


class ExperienceRepository(Repository[Experience]):
    """CRUD for experiences, listed most recent ``start_date`` first."""

    model = Experience
    label = "experience"
    not_found_message = "Experiencia no encontrada"
    fields = (
        "title",
        "position",
        "company",
        "duration",
        "start_date",
        "end_date",
        "description",
        "responsibilities",
        "achievements",
        "technologies",
        "type",
        "location",
        "current",
        "order",
    )
    required = (
        RequiredField("title", "title", "El título es requerido"),
        RequiredField("company", "company", "La empresa es requerida"),
        RequiredField("start_date", "startDate", "La fecha de inicio es requerida"),
        RequiredField("description", "description", "La descripción es requerida"),
    )
    choices = {"type": ("type", EXPERIENCE_TYPES)}

    def _ordering(self) -> list[Any]:
        return [Experience.start_date.desc(), Experience.created_at.desc()]
