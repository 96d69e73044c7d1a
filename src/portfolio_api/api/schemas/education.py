"""Pydantic schemas for education API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from portfolio_api.api.schemas.common import CamelModel, UtcDatetime


EducationStatus = Literal["completed", "in-progress", "planned"]


class EducationResponse(CamelModel):
    """Response schema for education data."""

    id: str
    institution: str
    degree: str
    field: str
    period: str
    start_date: str
    end_date: str
    description: str
    achievements: list[str]
    status: EducationStatus
    current: bool
    order: int
    gpa: float | None = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


class EducationCreateRequest(CamelModel):
    """Request schema for creating an education entry."""

    institution: str | None = Field(None, description="School or university name")
    degree: str | None = Field(None, description="Degree or certificate name")
    field: str = Field("", description="Major or field of study")
    period: str = Field("", description="Human-readable period")
    start_date: str | None = Field(None, description="Start date, e.g. 2019-03")
    end_date: str = Field("", description="End date")
    description: str = Field("", description="Free-form description")
    achievements: list[str] = Field(default_factory=list)
    status: EducationStatus = Field("completed", description="Completion status")
    current: bool = Field(False, description="Whether currently enrolled")
    order: int = Field(0, description="Display ordering hint")
    gpa: float | None = Field(None, description="Grade point average")


class EducationUpdateRequest(EducationCreateRequest):
    """Request schema for updating an education entry.

    All fields are optional; only provided fields are updated.
    """
