"""Certification repository and the expiry helper used for presentation."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any

from portfolio_api.data.models import NO_EXPIRATION, Certification
from portfolio_api.services.repository import Repository, RequiredField

__all__ = ["CertificationRepository", "is_active"]

_DATE_FORMATS = ("%Y-%m-%d", "%Y-%m", "%Y")


def _parse_date(value: str) -> date | None:
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(value.strip(), fmt).date()
        except ValueError:
            continue
    return None


def is_active(expiry_date: str | None, today: date | None = None) -> bool:
    """Whether a certification with this expiry is still valid.

    Absent, ``No expiration`` and unparseable expiry strings count as active.
    Month or year precision expiries are compared against their first day.
    """
    if not expiry_date or expiry_date.strip() in ("", NO_EXPIRATION):
        return True
    expires = _parse_date(expiry_date)
    if expires is None:
        return True
    return expires > (today or datetime.now(UTC).date())


class CertificationRepository(Repository[Certification]):
    """CRUD for certifications, listed most recent ``issue_date`` first."""

    model = Certification
    label = "certification"
    not_found_message = "Certificación no encontrada"
    fields = (
        "name",
        "issuer",
        "issue_date",
        "expiry_date",
        "credential_id",
        "credential_url",
        "description",
        "skills",
        "order",
    )
    required = (
        RequiredField("name", "name", "El nombre es requerido"),
        RequiredField("issuer", "issuer", "El emisor es requerido"),
        RequiredField("issue_date", "issueDate", "La fecha de emisión es requerida"),
    )

    def _ordering(self) -> list[Any]:
        return [Certification.issue_date.desc(), Certification.created_at.desc()]

    def _to_dict(self, record: Certification) -> dict[str, Any]:
        result = super()._to_dict(record)
        result["active"] = is_active(record.expiry_date)
        return result
