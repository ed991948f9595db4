"""Request/response schemas for GitHub display configurations."""

from datetime import datetime
from typing import Literal

from pydantic import Field, model_validator

from portfolio.schemas.common import CamelModel

GithubConfigType = Literal["user", "repository"]


def _check_value(config_type: str | None, value: str | None) -> None:
    if config_type == "repository" and value is not None:
        owner, sep, repo = value.partition("/")
        if not sep or not owner or not repo or "/" in repo:
            raise ValueError("value must be 'owner/repo' when type is 'repository'")


class GithubConfigCreate(CamelModel):
    type: GithubConfigType
    value: str = Field(..., min_length=1, max_length=255, description="Username or owner/repo")
    display_name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    is_enabled: bool = True
    order: int = 0

    @model_validator(mode="after")
    def validate_value_for_type(self) -> "GithubConfigCreate":
        _check_value(self.type, self.value)
        return self


class GithubConfigUpdate(CamelModel):
    type: GithubConfigType | None = None
    value: str | None = Field(default=None, min_length=1, max_length=255)
    display_name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    is_enabled: bool | None = None
    order: int | None = None

    @model_validator(mode="after")
    def validate_value_for_type(self) -> "GithubConfigUpdate":
        _check_value(self.type, self.value)
        return self


class GithubConfigRead(CamelModel):
    id: int
    type: str
    value: str
    display_name: str | None = None
    description: str | None = None
    is_enabled: bool
    order: int
    created_at: datetime
    updated_at: datetime
