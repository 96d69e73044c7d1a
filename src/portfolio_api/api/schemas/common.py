"""Shared Pydantic schemas: camelCase base model and response envelopes."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated, Generic, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; stored values are always UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """Base model exposing snake_case attributes as camelCase JSON keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class FieldErrorItem(BaseModel):
    """A single field-level validation message."""

    field: str
    message: str


class DataEnvelope(BaseModel, Generic[T]):
    """Successful response carrying one payload."""

    success: bool = True
    data: T


class ListEnvelope(BaseModel, Generic[T]):
    """Successful response carrying a list of records."""

    success: bool = True
    count: int
    data: list[T]


class MessageEnvelope(BaseModel):
    """Acknowledgement without a payload."""

    success: bool = True
    message: str


class ErrorEnvelope(BaseModel):
    """Failure response."""

    success: bool = False
    message: str
    errors: list[FieldErrorItem] | None = Field(default=None)
    error: str | None = Field(default=None, description="Detail, development mode only")
