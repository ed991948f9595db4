"""GitHub display configuration routes: authenticated reads, admin-only writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portfolio.api.auth import get_current_user, require_admin
from portfolio.core.database import get_db
from portfolio.models import GithubConfig
from portfolio.schemas.auth import CurrentUser
from portfolio.schemas.common import MessageResponse
from portfolio.schemas.github_config import (
    GithubConfigCreate,
    GithubConfigRead,
    GithubConfigUpdate,
)
from portfolio.services.storage import GithubConfigStorage

router = APIRouter()


@router.get("", response_model=list[GithubConfigRead])
def list_github_configs(
    db: Annotated[Session, Depends(get_db)],
    _user: Annotated[CurrentUser, Depends(get_current_user)],
) -> list[GithubConfig]:
    return GithubConfigStorage(db).list()


@router.post("", response_model=GithubConfigRead, status_code=status.HTTP_201_CREATED)
def create_github_config(
    body: GithubConfigCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> GithubConfig:
    return GithubConfigStorage(db).create(body)


@router.put("/{config_id}", response_model=GithubConfigRead)
def update_github_config(
    config_id: int,
    body: GithubConfigUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> GithubConfig:
    return GithubConfigStorage(db).update(config_id, body)


@router.delete("/{config_id}", response_model=MessageResponse)
def delete_github_config(
    config_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    GithubConfigStorage(db).delete(config_id)
    return MessageResponse(message="GitHub configuration deleted successfully")
