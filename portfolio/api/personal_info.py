"""Personal info routes: the singleton profile record."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portfolio.api.auth import require_admin
from portfolio.core.database import get_db
from portfolio.models import PersonalInfo
from portfolio.schemas.auth import CurrentUser
from portfolio.schemas.personal_info import PersonalInfoRead, PersonalInfoUpdate
from portfolio.services.storage import PersonalInfoStorage

router = APIRouter()


@router.get("", response_model=PersonalInfoRead | None)
def get_personal_info(db: Annotated[Session, Depends(get_db)]) -> PersonalInfo | None:
    """Return the profile, or null when none has been saved yet."""
    return PersonalInfoStorage(db).get()


@router.put("", response_model=PersonalInfoRead)
def put_personal_info(
    body: PersonalInfoUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> PersonalInfo:
    """Upsert: update the existing profile or create it on first save."""
    return PersonalInfoStorage(db).upsert(body)
