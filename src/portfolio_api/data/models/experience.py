"""Work experience model.

Dates are kept as the free-form strings the admin panel submits
(``2023-01``, ``2021-05-14``) and sort lexically.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, Boolean, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.data.db import Base, new_id, utcnow

EXPERIENCE_TYPES = ("full-time", "part-time", "freelance", "contract", "internship")


class Experience(Base):
    """A position held at a company.

    Attributes:
        id: Generated hex identifier.
        title: Role title shown in the timeline.
        position: Optional formal position name.
        company: Employer name.
        duration: Optional human-readable duration ("2 años").
        start_date: Start date string.
        end_date: End date string, ``Present`` while ongoing.
        description: Summary of the role.
        responsibilities: Bullet list of duties.
        achievements: Bullet list of results.
        technologies: Technologies used.
        type: Employment type.
        location: Free-form location.
        current: Whether this is the current position.
        order: Display ordering hint.
    """

    __tablename__ = "experiences"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    position: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    company: Mapped[str] = mapped_column(String(255), nullable=False)
    duration: Mapped[str] = mapped_column(String(128), nullable=False, default="")
    start_date: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    end_date: Mapped[str] = mapped_column(String(32), nullable=False, default="Present")
    description: Mapped[str] = mapped_column(Text, nullable=False)
    responsibilities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    achievements: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    technologies: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    type: Mapped[str] = mapped_column(String(32), nullable=False, default="full-time")
    location: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    current: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
