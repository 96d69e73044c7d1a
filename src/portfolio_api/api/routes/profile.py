"""Profile routes for the API."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from portfolio_api.api.dependencies import ADMIN_ONLY, get_profile_repository, guarded
from portfolio_api.api.schemas.common import DataEnvelope
from portfolio_api.api.schemas.profile import ProfileResponse, ProfileUpdateRequest
from portfolio_api.services import ProfileRepository

router = APIRouter(prefix="/profile", tags=["profile"])

RepositoryDep = Annotated[ProfileRepository, Depends(get_profile_repository)]

_NESTED_FIELDS = ("social_links", "skills", "stats")


def _profile_changes(data: ProfileUpdateRequest) -> dict[str, Any]:
    """Provided fields only; nested objects are replaced as a whole."""
    changes = data.model_dump(exclude_unset=True)
    for field in _NESTED_FIELDS:
        if field in changes:
            changes[field] = getattr(data, field).model_dump()
    return changes


@router.get("", response_model=DataEnvelope[ProfileResponse])
def get_profile(repository: RepositoryDep) -> DataEnvelope[ProfileResponse]:
    """Return the public profile, creating the default one on first access."""
    return DataEnvelope(data=ProfileResponse(**repository.get_or_create_singleton()))


@router.put(
    "",
    response_model=DataEnvelope[ProfileResponse],
    dependencies=guarded(ADMIN_ONLY),
)
def update_profile(
    data: ProfileUpdateRequest, repository: RepositoryDep
) -> DataEnvelope[ProfileResponse]:
    """Upsert the profile. Only provided fields are updated."""
    return DataEnvelope(data=ProfileResponse(**repository.upsert(_profile_changes(data))))
