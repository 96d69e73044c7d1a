"""Education model for the portfolio's academic history."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import JSON, Boolean, CheckConstraint, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_api.data.db import Base, new_id, utcnow

EDUCATION_STATUSES = ("completed", "in-progress", "planned")


class Education(Base):
    """Education entry.

    Attributes:
        id: Generated hex identifier.
        institution: Name of school/university.
        degree: Degree or certificate name.
        field: Major/field of study.
        period: Optional human-readable period ("2019 - 2023").
        start_date: Start date string.
        end_date: End date string.
        description: Free-form description.
        achievements: Honors or activities.
        status: Completion status.
        current: Whether currently enrolled.
        order: Display ordering hint.
        gpa: Grade point average, if reported.
    """

    __tablename__ = "education"
    __table_args__ = (CheckConstraint("gpa IS NULL OR gpa >= 0", name="ck_education_gpa"),)

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    institution: Mapped[str] = mapped_column(String(255), nullable=False)
    degree: Mapped[str] = mapped_column(String(255), nullable=False)
    field: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    period: Mapped[str] = mapped_column(String(128), nullable=False, default="")
    start_date: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
    end_date: Mapped[str] = mapped_column(String(32), nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    achievements: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="completed")
    current: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    gpa: Mapped[float | None] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
