"""Singleton profile model backing the public landing page.

Only one row is ever intended to exist; see ``ProfileRepository``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.data.db import Base, new_id, utcnow

SOCIAL_NETWORKS = ("linkedin", "github", "whatsapp", "email", "twitter")
SKILL_CATEGORIES = ("languages", "frontend", "backend", "databases", "security", "tools", "other")


def default_social_links() -> dict[str, str]:
    return {network: "" for network in SOCIAL_NETWORKS}


def default_skills() -> dict[str, list[str]]:
    return {category: [] for category in SKILL_CATEGORIES}


def default_stats() -> dict[str, int]:
    return {"years_experience": 2, "projects_completed": 0, "certifications": 0}


class Profile(Base):
    """Portfolio owner's public profile.

    Attributes:
        id: Generated hex identifier.
        name: Display name.
        title: Headline role.
        subtitle: Secondary headline.
        bio: Short biography.
        description: Longer about-me text.
        profile_image: Image path, URL, or data URI.
        cv_url: Link to a downloadable CV.
        location: Free-form location.
        social_links: Mapping of network name to URL/handle.
        skills: Mapping of skill category to list of skill names.
        stats: Headline counters (years of experience, projects, certifications).
        created_at: UTC timestamp when the profile was created.
        updated_at: UTC timestamp of the last change.
    """

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default="Portfolio Owner")
    title: Mapped[str] = mapped_column(
        String(255), nullable=False, default="Full-Stack Developer & Cybersecurity Specialist"
    )
    subtitle: Mapped[str] = mapped_column(
        String(255), nullable=False, default="Desarrollador Web & Especialista en Seguridad"
    )
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    profile_image: Mapped[str] = mapped_column(
        Text, nullable=False, default="/assets/profile.jpg"
    )
    cv_url: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    social_links: Mapped[dict[str, Any]] = mapped_column(
        JSON, nullable=False, default=default_social_links
    )
    skills: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=default_skills)
    stats: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=default_stats)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
