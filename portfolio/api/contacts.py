"""Contact form routes: public submit, admin-only inbox management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from portfolio.api.auth import require_admin
from portfolio.core.database import get_db
from portfolio.models import Contact
from portfolio.schemas.auth import CurrentUser
from portfolio.schemas.common import MessageResponse
from portfolio.schemas.contact import ContactCreate, ContactRead
from portfolio.services.storage import ContactStorage

logger = logging.getLogger(__name__)

# Mounted without prefix: POST /contact is public, /contacts/* is the admin inbox.
router = APIRouter()


@router.post("/contact", response_model=ContactRead, status_code=status.HTTP_201_CREATED)
def submit_contact(body: ContactCreate, db: Annotated[Session, Depends(get_db)]) -> Contact:
    """Store a contact form message. New messages are always unread."""
    contact = ContactStorage(db).create(body)
    logger.info("Contact message received", extra={"contact_id": contact.id})
    return contact


@router.get("/contacts", response_model=list[ContactRead])
def list_contacts(
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> list[Contact]:
    return ContactStorage(db).list()


@router.get("/contacts/{contact_id}", response_model=ContactRead)
def get_contact(
    contact_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> Contact:
    return ContactStorage(db).get(contact_id)


@router.put("/contacts/{contact_id}/read", response_model=MessageResponse)
def mark_contact_read(
    contact_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    ContactStorage(db).mark_as_read(contact_id)
    return MessageResponse(message="Contact marked as read")


@router.delete("/contacts/{contact_id}", response_model=MessageResponse)
def delete_contact(
    contact_id: int,
    db: Annotated[Session, Depends(get_db)],
    _admin: Annotated[CurrentUser, Depends(require_admin)],
) -> MessageResponse:
    ContactStorage(db).delete(contact_id)
    return MessageResponse(message="Contact deleted successfully")
