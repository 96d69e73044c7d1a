"""Certification routes for the API.

Mutations require an authenticated caller but not the admin role.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from portfolio_api.api.dependencies import AUTHENTICATED, get_certification_repository, guarded
from portfolio_api.api.schemas.common import DataEnvelope, ListEnvelope, MessageEnvelope
from portfolio_api.api.schemas.certifications import (
    CertificationCreateRequest,
    CertificationResponse,
    CertificationUpdateRequest,
)
from portfolio_api.services import CertificationRepository

router = APIRouter(prefix="/certifications", tags=["certifications"])

RepositoryDep = Annotated[CertificationRepository, Depends(get_certification_repository)]
CertificationId = Annotated[str, Path(description="Certification ID")]


@router.get("", response_model=ListEnvelope[CertificationResponse])
def list_certifications(repository: RepositoryDep) -> ListEnvelope[CertificationResponse]:
    """List certifications, most recently issued first."""
    entries = [CertificationResponse(**e) for e in repository.list_all()]
    return ListEnvelope(count=len(entries), data=entries)


@router.get("/{certification_id}", response_model=DataEnvelope[CertificationResponse])
def get_certification(
    certification_id: CertificationId, repository: RepositoryDep
) -> DataEnvelope[CertificationResponse]:
    """Get a specific certification by ID."""
    return DataEnvelope(data=CertificationResponse(**repository.get_by_id(certification_id)))


@router.post(
    "",
    response_model=DataEnvelope[CertificationResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=guarded(AUTHENTICATED),
)
def create_certification(
    data: CertificationCreateRequest, repository: RepositoryDep
) -> DataEnvelope[CertificationResponse]:
    """Create a new certification."""
    return DataEnvelope(data=CertificationResponse(**repository.create(data.model_dump())))


@router.put(
    "/{certification_id}",
    response_model=DataEnvelope[CertificationResponse],
    dependencies=guarded(AUTHENTICATED),
)
def update_certification(
    certification_id: CertificationId, data: CertificationUpdateRequest, repository: RepositoryDep
) -> DataEnvelope[CertificationResponse]:
    """Update an existing certification. Only provided fields are updated."""
    result = repository.update(certification_id, data.model_dump(exclude_unset=True))
    return DataEnvelope(data=CertificationResponse(**result))


@router.delete(
    "/{certification_id}",
    response_model=MessageEnvelope,
    dependencies=guarded(AUTHENTICATED),
)
def delete_certification(
    certification_id: CertificationId, repository: RepositoryDep
) -> MessageEnvelope:
    """Delete a certification."""
    repository.delete(certification_id)
    return MessageEnvelope(message="Certificación eliminada correctamente")
