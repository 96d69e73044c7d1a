"""Education repository: academic history entries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from portfolio_api.data.models import EDUCATION_STATUSES, Education
from portfolio_api.errors import FieldError
from portfolio_api.services.repository import Repository, RequiredField

__all__ = ["EducationRepository"]

MAX_GPA = 10.0


class EducationRepository(Repository[Education]):
    """CRUD for education entries, listed most recent ``start_date`` first."""

    model = Education
    label = "education"
    not_found_message = "Educación no encontrada"
    fields = (
        "institution",
        "degree",
        "field",
        "period",
        "start_date",
        "end_date",
        "description",
        "achievements",
        "status",
        "current",
        "order",
        "gpa",
    )
    required = (
        RequiredField("degree", "degree", "El título es requerido"),
        RequiredField("institution", "institution", "La institución es requerida"),
        RequiredField("start_date", "startDate", "La fecha de inicio es requerida"),
    )
    choices = {"status": ("status", EDUCATION_STATUSES)}

    def _ordering(self) -> list[Any]:
        return [Education.start_date.desc(), Education.created_at.desc()]

    def _validate(self, data: Mapping[str, Any]) -> list[FieldError]:
        errors = super()._validate(data)
        gpa = data.get("gpa")
        # Scales differ by country (4.0, 5.0, 10.0); only reject nonsense.
        if gpa is not None and not 0.0 <= gpa <= MAX_GPA:
            errors.append({"field": "gpa", "message": "El promedio debe estar entre 0 y 10"})
        return errors
