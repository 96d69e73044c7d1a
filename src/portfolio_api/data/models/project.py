"""ORM model representing a showcased portfolio project."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.data.db import Base, new_id, utcnow

PROJECT_CATEGORIES = ("fullstack", "frontend", "backend", "security", "mobile", "other")
PROJECT_STATUSES = ("completed", "in-progress", "archived")


class Project(Base):
    """A project shown in the portfolio grid.

    ``featured`` projects are listed first, then by ``order`` ascending, then
    newest first.
    """

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    long_description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image: Mapped[str] = mapped_column(Text, nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    technologies: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    category: Mapped[str] = mapped_column(String(32), nullable=False, default="fullstack")
    github_url: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    live_url: Mapped[str] = mapped_column(String(1024), nullable=False, default="")
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="completed")
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    highlights: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    challenges: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
