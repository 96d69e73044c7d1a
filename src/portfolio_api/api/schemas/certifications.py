"""Pydantic schemas for certification API endpoints."""

from __future__ import annotations

from pydantic import Field

from portfolio_api.api.schemas.common import CamelModel, UtcDatetime


class CertificationResponse(CamelModel):
    """Response schema for certification data.

    ``active`` is computed from ``expiryDate`` and is never stored.
    """

    id: str
    name: str
    issuer: str
    issue_date: str
    expiry_date: str
    credential_id: str
    credential_url: str
    description: str
    skills: list[str]
    order: int
    active: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime


class CertificationCreateRequest(CamelModel):
    """Request schema for creating a certification."""

    name: str | None = Field(None, description="Certification name")
    issuer: str | None = Field(None, description="Issuing organization")
    issue_date: str | None = Field(None, description="Issue date, e.g. 2024-02")
    expiry_date: str = Field("No expiration", description="Expiry date or 'No expiration'")
    credential_id: str = Field("", description="Credential identifier")
    credential_url: str = Field("", description="Verification URL")
    description: str = Field("", description="Free-form description")
    skills: list[str] = Field(default_factory=list)
    order: int = Field(0, description="Display ordering hint")


class CertificationUpdateRequest(CertificationCreateRequest):
    """Request schema for updating a certification.

    All fields are optional; only provided fields are updated.
    """
