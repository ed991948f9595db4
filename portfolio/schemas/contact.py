"""Request/response schemas for contact form messages."""

from datetime import datetime

from pydantic import Field, field_validator

from portfolio.schemas.common import CamelModel


class ContactCreate(CamelModel):
    """Public contact form submission. is_read is never settable here."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=320)
    subject: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip()
        local, sep, domain = v.partition("@")
        if not sep or not local or "." not in domain:
            raise ValueError("email must be a valid address")
        return v


class ContactRead(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    is_read: bool
    created_at: datetime
