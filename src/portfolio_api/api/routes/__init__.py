"""Route handlers for the API."""

from portfolio_api.api.routes import (
    auth,
    certifications,
    education,
    experiences,
    health,
    profile,
    projects,
)

__all__ = [
    "auth",
    "certifications",
    "education",
    "experiences",
    "health",
    "profile",
    "projects",
]
