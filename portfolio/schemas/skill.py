"""Request/response schemas for skills."""

from datetime import datetime

from pydantic import Field

from portfolio.schemas.common import CamelModel


class SkillCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    icon: str = Field(..., min_length=1, max_length=255, description="Client icon name")
    color: str = Field(..., min_length=1, max_length=255, description="CSS color class")
    category: str = Field(..., min_length=1, max_length=64)
    is_active: bool = True
    order: int = 0


class SkillUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    icon: str | None = Field(default=None, min_length=1, max_length=255)
    color: str | None = Field(default=None, min_length=1, max_length=255)
    category: str | None = Field(default=None, min_length=1, max_length=64)
    is_active: bool | None = None
    order: int | None = None


class SkillRead(SkillCreate):
    id: int
    created_at: datetime
