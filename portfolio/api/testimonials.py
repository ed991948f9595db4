"""Testimonial routes: public list of active testimonials, admin management."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portfolio.api.auth import require_admin
from portfolio.core.database import get_db
from portfolio.models import Testimonial
from portfolio.schemas.auth import CurrentUser
from portfolio.schemas.common import MessageResponse
from portfolio.schemas.testimonial import (
    TestimonialCreate,
    TestimonialRead,
    TestimonialUpdate,
)
from portfolio.services.storage import TestimonialStorage

router = APIRouter()


@router.get("", response_model=list[TestimonialRead])
def list_active_testimonials(db: Annotated[Session, Depends(get_db)]) -> list[Testimonial]:
    return TestimonialStorage(db).list_active()


@router.get("/all", response_model=list[TestimonialRead])
def list_all_testimonials(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> list[Testimonial]:
    """Every testimonial including inactive ones (admin dashboard)."""
    return TestimonialStorage(db).list()


@router.post("", response_model=TestimonialRead, status_code=status.HTTP_201_CREATED)
def create_testimonial(
    body: TestimonialCreate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Testimonial:
    return TestimonialStorage(db).create(body)


@router.put("/{testimonial_id}", response_model=TestimonialRead)
def update_testimonial(
    testimonial_id: int,
    body: TestimonialUpdate,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Testimonial:
    return TestimonialStorage(db).update(testimonial_id, body)


@router.delete("/{testimonial_id}", response_model=MessageResponse)
def delete_testimonial(
    testimonial_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    TestimonialStorage(db).delete(testimonial_id)
    return MessageResponse(message="Testimonial deleted successfully")
