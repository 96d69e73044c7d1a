"""Generic CRUD repository shared by the portfolio content resources.

Each concrete repository declares its ORM model, writable fields, required
fields and sort order; this base supplies list/get/create/update/delete with
validation that always runs before anything is written.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, NamedTuple, TypeVar

from sqlalchemy.orm import Query

from portfolio_api.data.db import Base, Database
from portfolio_api.errors import FieldError, NotFound, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RequiredField(NamedTuple):
    """A field that must be present and non-empty.

    Attributes:
        name: Attribute name on the model.
        label: Name reported to API clients (camelCase wire name).
        message: Human-readable error message.
    """

    name: str
    label: str
    message: str


def is_blank(value: Any) -> bool:
    """True for None, whitespace-only strings and empty collections."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, list | tuple | set | dict):
        return len(value) == 0
    return False


class Repository(Generic[ModelT]):
    """Persistence and validation for one entity type.

    Subclasses set ``model``, ``fields`` and ``required`` and may override
    ``_ordering``, ``_apply_filters`` and ``_validate``.
    """

    model: ClassVar[type[Base]]
    fields: ClassVar[tuple[str, ...]] = ()
    required: ClassVar[tuple[RequiredField, ...]] = ()
    # attribute name -> (wire label, allowed values)
    choices: ClassVar[dict[str, tuple[str, tuple[str, ...]]]] = {}
    label: ClassVar[str] = "record"
    not_found_message: ClassVar[str] = "Recurso no encontrado"

    def __init__(self, database: Database) -> None:
        self.database = database

    # -- hooks -----------------------------------------------------------

    def _ordering(self) -> list[Any]:
        return [self.model.created_at.desc()]

    def _apply_filters(self, query: Query, filters: Mapping[str, Any]) -> Query:
        return query

    def _validate(self, data: Mapping[str, Any]) -> list[FieldError]:
        """Return field errors for a complete (merged) record."""
        errors: list[FieldError] = [
            {"field": req.label, "message": req.message}
            for req in self.required
            if is_blank(data.get(req.name))
        ]
        for name, (label, allowed) in self.choices.items():
            value = data.get(name)
            if value is not None and value not in allowed:
                message = f"Valor inválido, use uno de: {', '.join(allowed)}"
                errors.append({"field": label, "message": message})
        return errors

    def _normalize(self, data: dict[str, Any]) -> dict[str, Any]:
        """Clean submitted values before validation. Default strips required strings."""
        for req in self.required:
            value = data.get(req.name)
            if isinstance(value, str):
                data[req.name] = value.strip()
        return data

    def _to_dict(self, record: ModelT) -> dict[str, Any]:
        result: dict[str, Any] = {"id": record.id}
        for field in self.fields:
            value = getattr(record, field)
            result[field] = list(value) if isinstance(value, list) else value
        result["created_at"] = record.created_at
        result["updated_at"] = record.updated_at
        return result

    # -- helpers ---------------------------------------------------------

    def _writable(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        return {field: payload[field] for field in self.fields if field in payload}

    def _check(self, data: Mapping[str, Any], action: str) -> None:
        errors = self._validate(data)
        if errors:
            logger.warning(
                "Rejected %s %s: %s", action, self.label, ", ".join(e["field"] for e in errors)
            )
            raise ValidationError(errors)

    # -- operations ------------------------------------------------------

    def list_all(self, **filters: Any) -> list[dict[str, Any]]:
        """Return every record matching ``filters`` in the entity's sort order."""
        with self.database.session() as session:
            query = self._apply_filters(session.query(self.model), filters)
            return [self._to_dict(r) for r in query.order_by(*self._ordering()).all()]

    def get_by_id(self, record_id: str) -> dict[str, Any]:
        """Return one record.

        Raises:
            NotFound: If no record has this id, including malformed ids.
        """
        with self.database.session() as session:
            record = session.get(self.model, record_id)
            if record is None:
                raise NotFound(self.not_found_message)
            return self._to_dict(record)

    def create(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Validate ``payload`` and persist a new record.

        Raises:
            ValidationError: If a required field is missing or a value is invalid.
        """
        data = self._normalize(self._writable(payload))
        self._check(data, "create")

        with self.database.session() as session:
            record = self.model(**data)
            session.add(record)
            session.flush()
            logger.info("Created %s %s", self.label, record.id)
            return self._to_dict(record)

    def update(self, record_id: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Replace the provided fields of an existing record.

        The merged record is re-validated before any change is written.

        Raises:
            NotFound: If the record does not exist.
            ValidationError: If the merged record is invalid.
        """
        changes = self._normalize(self._writable(payload))

        with self.database.session() as session:
            record = session.get(self.model, record_id)
            if record is None:
                raise NotFound(self.not_found_message)

            merged = {**self._to_dict(record), **changes}
            self._check(merged, "update")

            for field, value in changes.items():
                setattr(record, field, value)
            session.flush()
            logger.info("Updated %s %s", self.label, record.id)
            return self._to_dict(record)

    def delete(self, record_id: str) -> None:
        """Remove a record.

        Raises:
            NotFound: If the record does not exist.
        """
        with self.database.session() as session:
            record = session.get(self.model, record_id)
            if record is None:
                raise NotFound(self.not_found_message)
            session.delete(record)
            logger.info("Deleted %s %s", self.label, record_id)

    def count(self) -> int:
        with self.database.session() as session:
            return session.query(self.model).count()
