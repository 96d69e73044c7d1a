"""Pydantic schemas for project API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from portfolio_api.api.schemas.common import CamelModel, UtcDatetime


ProjectCategory = Literal["fullstack", "frontend", "backend", "security", "mobile", "other"]
ProjectStatus = Literal["completed", "in-progress", "archived"]


class ProjectResponse(CamelModel):
    """Response schema for project data."""

    id: str
    title: str
    description: str
    long_description: str
    image: str
    images: list[str]
    technologies: list[str]
    category: ProjectCategory
    github_url: str
    live_url: str
    featured: bool
    status: ProjectStatus
    order: int
    highlights: list[str]
    challenges: list[str]
    created_at: UtcDatetime
    updated_at: UtcDatetime


class ProjectCreateRequest(CamelModel):
    """Request schema for creating a project.

    Required fields (title, description, image, technologies) are checked by
    the repository so that every missing field is reported at once.
    """

    title: str | None = Field(None, description="Project name")
    description: str | None = Field(None, description="Short summary")
    long_description: str = Field("", description="Full write-up")
    image: str | None = Field(None, description="Cover image path, URL or data URI")
    images: list[str] = Field(default_factory=list, description="Gallery images")
    technologies: list[str] | None = Field(None, description="Non-empty list of technologies")
    category: ProjectCategory = Field("fullstack", description="Project category")
    github_url: str = Field("", description="Repository URL")
    live_url: str = Field("", description="Deployed URL")
    featured: bool = Field(False, description="Pin to the top of the list")
    status: ProjectStatus = Field("completed", description="Lifecycle status")
    order: int = Field(0, description="Display ordering (lower first)")
    highlights: list[str] = Field(default_factory=list)
    challenges: list[str] = Field(default_factory=list)


class ProjectUpdateRequest(ProjectCreateRequest):
    """Request schema for updating a project.

    All fields are optional; only provided fields are updated.
    """
