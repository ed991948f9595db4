"""Request/response schemas for website sections."""

from datetime import datetime

from pydantic import Field

from portfolio.schemas.common import CamelModel


class WebsiteSectionCreate(CamelModel):
    section_key: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    subtitle: str | None = Field(default=None, max_length=1024)
    content: str | None = None
    image_url: str | None = Field(default=None, max_length=2048)
    button_text: str | None = Field(default=None, max_length=255)
    button_url: str | None = Field(default=None, max_length=2048)
    order: int = 0
    is_active: bool = True
    section_type: str = Field(..., min_length=1, max_length=32)
    layout: str = Field(default="vertical", max_length=32)
    target_page: str = Field(default="regular", max_length=32)
    columns: int = Field(default=1, ge=1, le=12)
    gap: str = Field(default="medium", max_length=32)
    custom_data: str | None = None


class WebsiteSectionUpdate(CamelModel):
    section_key: str | None = Field(default=None, min_length=1, max_length=255)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    subtitle: str | None = Field(default=None, max_length=1024)
    content: str | None = None
    image_url: str | None = Field(default=None, max_length=2048)
    button_text: str | None = Field(default=None, max_length=255)
    button_url: str | None = Field(default=None, max_length=2048)
    order: int | None = None
    is_active: bool | None = None
    section_type: str | None = Field(default=None, min_length=1, max_length=32)
    layout: str | None = Field(default=None, max_length=32)
    target_page: str | None = Field(default=None, max_length=32)
    columns: int | None = Field(default=None, ge=1, le=12)
    gap: str | None = Field(default=None, max_length=32)
    custom_data: str | None = None


class WebsiteSectionRead(WebsiteSectionCreate):
    id: int
    created_at: datetime
    updated_at: datetime
