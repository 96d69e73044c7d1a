"""Experience routes for the API.

Mutations require an authenticated caller but not the admin role.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_api.api.dependencies import AUTHENTICATED, get_experience_repository, guarded
from portfolio_api.api.schemas.common import DataEnvelope, ListEnvelope, MessageEnvelope
from portfolio_api.api.schemas.experiences import (
    ExperienceCreateRequest,
    ExperienceResponse,
    ExperienceUpdateRequest,
)
from portfolio_api.services import ExperienceRepository

router = APIRouter(prefix="/experiences", tags=["experiences"])

RepositoryDep = Annotated[ExperienceRepository, Depends(get_experience_repository)]
ExperienceId = Annotated[str, Path(description="Experience ID")]


@router.get("", response_model=ListEnvelope[ExperienceResponse])
def list_experiences(repository: RepositoryDep) -> ListEnvelope[ExperienceResponse]:
    """List experiences, most recent start date first."""
    entries = [ExperienceResponse(**e) for e in repository.list_all()]
    return ListEnvelope(count=len(entries), data=entries)


@router.get("/{experience_id}", response_model=DataEnvelope[ExperienceResponse])
def get_experience(
    experience_id: ExperienceId, repository: RepositoryDep
) -> DataEnvelope[ExperienceResponse]:
    """Get a specific experience entry by ID."""
    return DataEnvelope(data=ExperienceResponse(**repository.get_by_id(experience_id)))


@router.post(
    "",
    response_model=DataEnvelope[ExperienceResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=guarded(AUTHENTICATED),
)
def create_experience(
    data: ExperienceCreateRequest, repository: RepositoryDep
) -> DataEnvelope[ExperienceResponse]:
    """Create a new experience entry."""
    return DataEnvelope(data=ExperienceResponse(**repository.create(data.model_dump())))


@router.put(
    "/{experience_id}",
    response_model=DataEnvelope[ExperienceResponse],
    dependencies=guarded(AUTHENTICATED),
)
def update_experience(
    experience_id: ExperienceId, data: ExperienceUpdateRequest, repository: RepositoryDep
) -> DataEnvelope[ExperienceResponse]:
    """Update an existing experience entry. Only provided fields are updated."""
    result = repository.update(experience_id, data.model_dump(exclude_unset=True))
    return DataEnvelope(data=ExperienceResponse(**result))


@router.delete(
    "/{experience_id}",
    response_model=MessageEnvelope,
    dependencies=guarded(AUTHENTICATED),
)
def delete_experience(
    experience_id: ExperienceId, repository: RepositoryDep
) -> MessageEnvelope:
    """Delete a experience entry."""
    repository.delete(experience_id)
    return MessageEnvelope(message="Experiencia eliminada correctamente")
