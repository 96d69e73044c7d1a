"""Education routes for the API.

Mutations require an authenticated caller but not the admin role.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_api.api.dependencies import AUTHENTICATED, get_education_repository, guarded
from portfolio_api.api.schemas.common import DataEnvelope, ListEnvelope, MessageEnvelope
from portfolio_api.api.schemas.education import (
    EducationCreateRequest,
    EducationResponse,
    EducationUpdateRequest,
)
from portfolio_api.services import EducationRepository

router = APIRouter(prefix="/education", tags=["education"])

RepositoryDep = Annotated[EducationRepository, Depends(get_education_repository)]
EducationId = Annotated[str, Path(description="Education ID")]


@router.get("", response_model=ListEnvelope[EducationResponse])
def list_educations(repository: RepositoryDep) -> ListEnvelope[EducationResponse]:
    """List education entries, most recent start date first."""
    entries = [EducationResponse(**e) for e in repository.list_all()]
    return ListEnvelope(count=len(entries), data=entries)


@router.get("/{education_id}", response_model=DataEnvelope[EducationResponse])
def get_education(
    education_id: EducationId, repository: RepositoryDep
) -> DataEnvelope[EducationResponse]:
    """Get a specific education entry by ID."""
    return DataEnvelope(data=EducationResponse(**repository.get_by_id(education_id)))


@router.post(
    "",
    response_model=DataEnvelope[EducationResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=guarded(AUTHENTICATED),
)
def create_education(
    data: EducationCreateRequest, repository: RepositoryDep
) -> DataEnvelope[EducationResponse]:
    """Create a new education entry."""
    return DataEnvelope(data=EducationResponse(**repository.create(data.model_dump())))


@router.put(
    "/{education_id}",
    response_model=DataEnvelope[EducationResponse],
    dependencies=guarded(AUTHENTICATED),
)
def update_education(
    education_id: EducationId, data: EducationUpdateRequest, repository: RepositoryDep
) -> DataEnvelope[EducationResponse]:
    """Update an existing education entry. Only provided fields are updated."""
    result = repository.update(education_id, data.model_dump(exclude_unset=True))
    return DataEnvelope(data=EducationResponse(**result))


@router.delete(
    "/{education_id}",
    response_model=MessageEnvelope,
    dependencies=guarded(AUTHENTICATED),
)
def delete_education(
    education_id: EducationId, repository: RepositoryDep
) -> MessageEnvelope:
    """Delete a education entry."""
    repository.delete(education_id)
    return MessageEnvelope(message="Educación eliminada correctamente")
