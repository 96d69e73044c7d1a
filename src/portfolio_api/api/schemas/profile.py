"""Pydantic schemas for the singleton profile."""

from __future__ import annotations

from pydantic import BaseModel, Field

from portfolio_api.api.schemas.common import CamelModel, UtcDatetime


class SocialLinks(BaseModel):
    linkedin: str = ""
    github: str = ""
    whatsapp: str = ""
    email: str = ""
    twitter: str = ""


class Skills(BaseModel):
    """Skill names grouped by category."""

    languages: list[str] = Field(default_factory=list)
    frontend: list[str] = Field(default_factory=list)
    backend: list[str] = Field(default_factory=list)
    databases: list[str] = Field(default_factory=list)
    security: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    other: list[str] = Field(default_factory=list)


class Stats(CamelModel):
    years_experience: int = Field(0, ge=0)
    projects_completed: int = Field(0, ge=0)
    certifications: int = Field(0, ge=0)


class ProfileResponse(CamelModel):
    """Response schema for profile data."""

    id: str
    name: str
    title: str
    subtitle: str
    bio: str
    description: str
    profile_image: str
    cv_url: str
    location: str
    social_links: SocialLinks
    skills: Skills
    stats: Stats
    created_at: UtcDatetime
    updated_at: UtcDatetime


class ProfileUpdateRequest(CamelModel):
    """Request schema for ``PUT /api/profile``.

    All fields are optional; only provided fields are updated. Nested objects
    (``socialLinks``, ``skills``, ``stats``) are replaced as a whole.
    """

    name: str = Field("", description="Display name")
    title: str = Field("", description="Headline role")
    subtitle: str = Field("", description="Secondary headline")
    bio: str = Field("", description="Short biography")
    description: str = Field("", description="Longer about-me text")
    profile_image: str = Field("", description="Image path, URL or data URI")
    cv_url: str = Field("", description="Link to a downloadable CV")
    location: str = Field("", description="Free-form location")
    social_links: SocialLinks = Field(default_factory=SocialLinks)
    skills: Skills = Field(default_factory=Skills)
    stats: Stats = Field(default_factory=Stats)
