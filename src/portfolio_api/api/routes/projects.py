"""Project routes for the API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from portfolio_api.api.dependencies import ADMIN_ONLY, get_project_repository, guarded
from portfolio_api.api.schemas.common import DataEnvelope, ListEnvelope, MessageEnvelope
from portfolio_api.api.schemas.projects import (
    ProjectCreateRequest,
    ProjectResponse,
    ProjectUpdateRequest,
)
from portfolio_api.services import ProjectRepository

router = APIRouter(prefix="/projects", tags=["projects"])

RepositoryDep = Annotated[ProjectRepository, Depends(get_project_repository)]
ProjectId = Annotated[str, Path(description="Project ID")]


def _parse_flag(value: str | None) -> bool | None:
    """Map "true"/"false" to a bool; anything else means no filter."""
    if value is None:
        return None
    return {"true": True, "false": False}.get(value.strip().lower())


@router.get("", response_model=ListEnvelope[ProjectResponse])
def list_projects(
    repository: RepositoryDep,
    category: Annotated[str | None, Query(description="Filter by category")] = None,
    featured: Annotated[str | None, Query(description="Filter by featured flag")] = None,
) -> ListEnvelope[ProjectResponse]:
    """List projects: featured first, then by order, then newest."""
    rows = repository.list_all(category=category, featured=_parse_flag(featured))
    projects = [ProjectResponse(**p) for p in rows]
    return ListEnvelope(count=len(projects), data=projects)


@router.get("/{project_id}", response_model=DataEnvelope[ProjectResponse])
def get_project(project_id: ProjectId, repository: RepositoryDep) -> DataEnvelope[ProjectResponse]:
    """Get a specific project by ID."""
    return DataEnvelope(data=ProjectResponse(**repository.get_by_id(project_id)))


@router.post(
    "",
    response_model=DataEnvelope[ProjectResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=guarded(ADMIN_ONLY),
)
def create_project(
    data: ProjectCreateRequest, repository: RepositoryDep
) -> DataEnvelope[ProjectResponse]:
    """Create a new project."""
    return DataEnvelope(data=ProjectResponse(**repository.create(data.model_dump())))


@router.put(
    "/{project_id}",
    response_model=DataEnvelope[ProjectResponse],
    dependencies=guarded(ADMIN_ONLY),
)
def update_project(
    project_id: ProjectId, data: ProjectUpdateRequest, repository: RepositoryDep
) -> DataEnvelope[ProjectResponse]:
    """Update an existing project. Only provided fields are updated."""
    result = repository.update(project_id, data.model_dump(exclude_unset=True))
    return DataEnvelope(data=ProjectResponse(**result))


@router.delete(
    "/{project_id}",
    response_model=MessageEnvelope,
    dependencies=guarded(ADMIN_ONLY),
)
def delete_project(project_id: ProjectId, repository: RepositoryDep) -> MessageEnvelope:
    """Delete a project."""
    repository.delete(project_id)
    return MessageEnvelope(message="Proyecto eliminado exitosamente")
