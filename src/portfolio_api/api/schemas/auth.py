"""Pydantic schemas for authentication endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials submitted to ``POST /api/auth/login``.

    Fields are optional here so that empty or missing values are reported as
    field-level validation errors by the credential store.
    """

    username: str | None = Field(None, description="Admin username")
    password: str | None = Field(None, description="Admin password")


class SetupRequest(BaseModel):
    """Request schema for the one-time admin bootstrap."""

    username: str | None = Field(None, description="At least 3 characters")
    email: str | None = Field(None, description="Contact email address")
    password: str | None = Field(None, description="At least 6 characters")


class UserResponse(BaseModel):
    """Public fields of an admin account."""

    id: str
    username: str
    email: str
    role: str


class LoginResponse(BaseModel):
    """Issued bearer token plus the authenticated user."""

    token: str
    user: UserResponse
