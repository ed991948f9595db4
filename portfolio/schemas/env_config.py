"""Request/response schemas for runtime env configuration."""

from pydantic import BaseModel, ConfigDict, Field


class EnvConfig(BaseModel):
    """Keys are kept in their env-file spelling."""

    model_config = ConfigDict(extra="ignore")

    GITHUB_TOKEN: str | None = Field(default="", max_length=512, description="GitHub API token")
