"""Pydantic schemas for experience API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from portfolio_api.api.schemas.common import CamelModel, UtcDatetime


ExperienceType = Literal["full-time", "part-time", "freelance", "contract", "internship"]


class ExperienceResponse(CamelModel):
    """Response schema for experience data."""

    id: str
    title: str
    position: str
    company: str
    duration: str
    start_date: str
    end_date: str
    description: str
    responsibilities: list[str]
    achievements: list[str]
    technologies: list[str]
    type: ExperienceType
    location: str
    current: bool
    order: int
    created_at: UtcDatetime
    updated_at: UtcDatetime


class ExperienceCreateRequest(CamelModel):
    """Request schema for creating an experience entry."""

    title: str | None = Field(None, description="Role title")
    position: str = Field("", description="Formal position name")
    company: str | None = Field(None, description="Employer name")
    duration: str = Field("", description="Human-readable duration")
    start_date: str | None = Field(None, description="Start date, e.g. 2023-01")
    end_date: str = Field("Present", description="End date or 'Present'")
    description: str | None = Field(None, description="Summary of the role")
    responsibilities: list[str] = Field(default_factory=list)
    achievements: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    type: ExperienceType = Field("full-time", description="Employment type")
    location: str = Field("", description="Free-form location")
    current: bool = Field(False, description="Whether this is the current position")
    order: int = Field(0, description="Display ordering hint")


class ExperienceUpdateRequest(ExperienceCreateRequest):
    """Request schema for updating an experience entry.

    All fields are optional; only provided fields are updated.
    """
