"""Skill routes: public list of active skills, admin-only writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portfolio.api.auth import require_admin
from portfolio.core.database import get_db
from portfolio.models import Skill
from portfolio.schemas.auth import CurrentUser
from portfolio.schemas.common import MessageResponse
from portfolio.schemas.skill import SkillCreate, SkillRead, SkillUpdate
from portfolio.services.storage import SkillStorage

router = APIRouter()


@router.get("", response_model=list[SkillRead])
def list_active_skills(db: Annotated[Session, Depends(get_db)]) -> list[Skill]:
    """Active skills ordered by their order field, then name."""
    return SkillStorage(db).list_active()


@router.get("/all", response_model=list[SkillRead])
def list_all_skills(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> list[Skill]:
    return SkillStorage(db).list()


@router.post("", response_model=SkillRead, status_code=status.HTTP_201_CREATED)
def create_skill(
    body: SkillCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Skill:
    return SkillStorage(db).create(body)


@router.put("/{skill_id}", response_model=SkillRead)
def update_skill(
    skill_id: int,
    body: SkillUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Skill:
    return SkillStorage(db).update(skill_id, body)


@router.delete("/{skill_id}", response_model=MessageResponse)
def delete_skill(
    skill_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    SkillStorage(db).delete(skill_id)
    return MessageResponse(message="Skill deleted successfully")
