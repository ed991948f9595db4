"""Request/response schemas for testimonials."""

from datetime import datetime

from pydantic import Field

from portfolio.schemas.common import CamelModel


class TestimonialCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    company: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    avatar_url: str | None = Field(default=None, max_length=2048)
    is_active: bool = True


class TestimonialUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    company: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, min_length=1)
    rating: int | None = Field(default=None, ge=1, le=5)
    avatar_url: str | None = Field(default=None, max_length=2048)
    is_active: bool | None = None


class TestimonialRead(TestimonialCreate):
    id: int
    created_at: datetime
