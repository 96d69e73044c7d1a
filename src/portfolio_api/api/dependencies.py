"""Shared dependencies for API routes: storage, repositories and guards.

Guards are plain dependencies that either return (continue) or raise a
domain error (terminal failure). Routes attach them as ordered chains with
``guarded``; FastAPI evaluates route dependencies in list order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Annotated, Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from portfolio_api.data.db import Database
from portfolio_api.data.models import ADMIN_ROLE
from portfolio_api.errors import Forbidden, InvalidToken, Unauthorized
from portfolio_api.services import (
    CertificationRepository,
    CredentialStore,
    EducationRepository,
    ExperienceRepository,
    Identity,
    ProfileRepository,
    ProjectRepository,
    TokenService,
)

bearer_scheme = HTTPBearer(auto_error=False)


def get_database(request: Request) -> Database:
    """Return the storage handle opened at startup."""
    return request.app.state.database


def get_token_service(request: Request) -> TokenService:
    return request.app.state.tokens


DatabaseDep = Annotated[Database, Depends(get_database)]


def get_credential_store(database: DatabaseDep) -> CredentialStore:
    return CredentialStore(database)


def get_profile_repository(database: DatabaseDep) -> ProfileRepository:
    return ProfileRepository(database)


def get_project_repository(database: DatabaseDep) -> ProjectRepository:
    return ProjectRepository(database)


def get_experience_repository(database: DatabaseDep) -> ExperienceRepository:
    return ExperienceRepository(database)


def get_education_repository(database: DatabaseDep) -> EducationRepository:
    return EducationRepository(database)


def get_certification_repository(database: DatabaseDep) -> CertificationRepository:
    return CertificationRepository(database)


def require_authenticated(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> Identity:
    """Resolve the caller from the ``Authorization: Bearer`` header.

    The identity is also stored on ``request.state.identity`` for guards
    that run later in the chain.

    Raises:
        Unauthorized: If the header is missing or the token does not verify.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized()
    try:
        identity = tokens.verify(credentials.credentials)
    except InvalidToken as exc:
        raise Unauthorized(exc.message) from exc

    request.state.identity = identity
    return identity


def require_admin(request: Request) -> None:
    """Reject callers whose role is not ``admin``.

    Must run after ``require_authenticated``.

    Raises:
        Unauthorized: If no identity was resolved earlier in the chain.
        Forbidden: If the resolved role is not ``admin``.
    """
    identity: Identity | None = getattr(request.state, "identity", None)
    if identity is None:
        raise Unauthorized()
    if identity.role != ADMIN_ROLE:
        raise Forbidden()


Guard = Callable[..., Any]

AUTHENTICATED: tuple[Guard, ...] = (require_authenticated,)
ADMIN_ONLY: tuple[Guard, ...] = (require_authenticated, require_admin)


def guarded(chain: Sequence[Guard]) -> list[Any]:
    """Turn an ordered guard chain into route ``dependencies``."""
    return [Depends(guard) for guard in chain]
