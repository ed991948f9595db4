"""Request/response schemas for the singleton personal info record."""

from datetime import datetime

from pydantic import Field

from portfolio.schemas.common import CamelModel


class PersonalInfoUpdate(CamelModel):
    """Full payload for PUT /personal-info (upsert)."""

    full_name: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    bio: str | None = None
    email: str | None = Field(default=None, max_length=320)
    phone: str | None = Field(default=None, max_length=64)
    location: str | None = Field(default=None, max_length=255)
    profile_image: str | None = Field(default=None, max_length=2048)
    resume_url: str | None = Field(default=None, max_length=2048)
    linkedin_url: str | None = Field(default=None, max_length=2048)
    github_url: str | None = Field(default=None, max_length=2048)
    twitter_url: str | None = Field(default=None, max_length=2048)
    website_url: str | None = Field(default=None, max_length=2048)
    years_of_experience: int | None = Field(default=None, ge=0, le=100)
    current_role: str | None = Field(default=None, max_length=255)
    company: str | None = Field(default=None, max_length=255)


class PersonalInfoRead(PersonalInfoUpdate):
    id: int
    updated_at: datetime
