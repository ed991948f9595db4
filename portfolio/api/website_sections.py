"""Website section routes: public reads (list, by key), admin-only writes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portfolio.api.auth import require_admin
from portfolio.core.database import get_db
from portfolio.models import WebsiteSection
from portfolio.schemas.auth import CurrentUser
from portfolio.schemas.common import MessageResponse
from portfolio.schemas.website_section import (
    WebsiteSectionCreate,
    WebsiteSectionRead,
    WebsiteSectionUpdate,
)
from portfolio.services.storage import WebsiteSectionStorage

router = APIRouter()


@router.get("", response_model=list[WebsiteSectionRead])
def list_sections(db: Annotated[Session, Depends(get_db)]) -> list[WebsiteSection]:
    return WebsiteSectionStorage(db).list()


@router.get("/{section_key}", response_model=WebsiteSectionRead)
def get_section_by_key(
    section_key: str,
    db: Annotated[Session, Depends(get_db)],
) -> WebsiteSection:
    """Sections are read by their unique key; writes address them by numeric id."""
    return WebsiteSectionStorage(db).get_by_key(section_key)


@router.post("", response_model=WebsiteSectionRead, status_code=status.HTTP_201_CREATED)
def create_section(
    body: WebsiteSectionCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> WebsiteSection:
    return WebsiteSectionStorage(db).create(body)


@router.put("/{section_id}", response_model=WebsiteSectionRead)
def update_section(
    section_id: int,
    body: WebsiteSectionUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> WebsiteSection:
    return WebsiteSectionStorage(db).update(section_id, body)


@router.delete("/{section_id}", response_model=MessageResponse)
def delete_section(
    section_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    WebsiteSectionStorage(db).delete(section_id)
    return MessageResponse(message="Website section deleted successfully")
