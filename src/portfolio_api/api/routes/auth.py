"""Authentication routes: login, current user and one-time setup."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from portfolio_api.api.dependencies import (
    get_credential_store,
    get_token_service,
    require_authenticated,
)
from portfolio_api.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    SetupRequest,
    UserResponse,
)
from portfolio_api.api.schemas.common import DataEnvelope, MessageEnvelope
from portfolio_api.errors import Unauthorized
from portfolio_api.services import CredentialStore, Identity, TokenService

router = APIRouter(prefix="/auth", tags=["auth"])

StoreDep = Annotated[CredentialStore, Depends(get_credential_store)]


@router.post("/login", response_model=DataEnvelope[LoginResponse])
def login(
    data: LoginRequest,
    store: StoreDep,
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> DataEnvelope[LoginResponse]:
    """Exchange a username and password for a bearer token."""
    user = store.authenticate(data.username, data.password)
    token = tokens.issue(user["id"], user["role"])
    return DataEnvelope(data=LoginResponse(token=token, user=UserResponse(**user)))


@router.get("/me", response_model=DataEnvelope[UserResponse])
def current_user(
    identity: Annotated[Identity, Depends(require_authenticated)],
    store: StoreDep,
) -> DataEnvelope[UserResponse]:
    """Return the account the bearer token belongs to."""
    user = store.get_user(identity.id)
    if user is None:
        raise Unauthorized("Usuario no encontrado")
    return DataEnvelope(data=UserResponse(**user))


@router.post(
    "/setup",
    response_model=MessageEnvelope,
    status_code=status.HTTP_201_CREATED,
)
def setup_admin(data: SetupRequest, store: StoreDep) -> MessageEnvelope:
    """Create the first administrator. Fails once any admin exists."""
    store.create_admin(data.username, data.email, data.password)
    return MessageEnvelope(message="Usuario administrador creado exitosamente")
