"""Project routes: public reads, admin-only writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from portfolio.api.auth import require_admin
from portfolio.core.database import get_db
from portfolio.models import Project
from portfolio.schemas.auth import CurrentUser
from portfolio.schemas.common import MessageResponse
from portfolio.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from portfolio.services.storage import ProjectStorage

router = APIRouter()


@router.get("", response_model=list[ProjectRead])
def list_projects(
    db: Annotated[Session, Depends(get_db)],
    category: Annotated[str | None, Query(max_length=32)] = None,
) -> list[Project]:
    """List projects, newest first; optionally only one category (regular or freelance)."""
    storage = ProjectStorage(db)
    if category:
        return storage.list_by_category(category)
    return storage.list()


@router.get("/{project_id}", response_model=ProjectRead)
def get_project(project_id: int, db: Annotated[Session, Depends(get_db)]) -> Project:
    return ProjectStorage(db).get(project_id)


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(
    body: ProjectCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Project:
    return ProjectStorage(db).create(body)


@router.put("/{project_id}", response_model=ProjectRead)
def update_project(
    project_id: int,
    body: ProjectUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Project:
    """Partial update: fields missing from the body keep their value."""
    return ProjectStorage(db).update(project_id, body)


@router.delete("/{project_id}", response_model=MessageResponse)
def delete_project(
    project_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    ProjectStorage(db).delete(project_id)
    return MessageResponse(message="Project deleted successfully")
