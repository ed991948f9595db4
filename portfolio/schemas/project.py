"""Request/response schemas for projects."""

from datetime import datetime
from typing import Literal

from pydantic import Field

from portfolio.schemas.common import CamelModel

ProjectCategory = Literal["regular", "freelance"]


class ProjectCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    long_description: str | None = None
    image_url: str | None = Field(default=None, max_length=2048)
    technologies: list[str] | None = None
    github_url: str | None = Field(default=None, max_length=2048)
    live_url: str | None = Field(default=None, max_length=2048)
    category: ProjectCategory
    featured: bool = False


class ProjectUpdate(CamelModel):
    """Partial update; only fields present in the body are applied."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    long_description: str | None = None
    image_url: str | None = Field(default=None, max_length=2048)
    technologies: list[str] | None = None
    github_url: str | None = Field(default=None, max_length=2048)
    live_url: str | None = Field(default=None, max_length=2048)
    category: ProjectCategory | None = None
    featured: bool | None = None


class ProjectRead(ProjectCreate):
    id: int
    created_at: datetime
    updated_at: datetime
