"""Pydantic request/response schemas."""

from portfolio.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    PublicUser,
    VerifyResponse,
)
from portfolio.schemas.common import CamelModel, MessageResponse
from portfolio.schemas.contact import ContactCreate, ContactRead
from portfolio.schemas.env_config import EnvConfig
from portfolio.schemas.github_config import (
    GithubConfigCreate,
    GithubConfigRead,
    GithubConfigUpdate,
)
from portfolio.schemas.health import HealthResponse
from portfolio.schemas.personal_info import PersonalInfoRead, PersonalInfoUpdate
from portfolio.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from portfolio.schemas.skill import SkillCreate, SkillRead, SkillUpdate
from portfolio.schemas.testimonial import (
    TestimonialCreate,
    TestimonialRead,
    TestimonialUpdate,
)
from portfolio.schemas.upload import UploadResponse
from portfolio.schemas.website_section import (
    WebsiteSectionCreate,
    WebsiteSectionRead,
    WebsiteSectionUpdate,
)

__all__ = [
    "CamelModel",
    "ContactCreate",
    "ContactRead",
    "CurrentUser",
    "EnvConfig",
    "GithubConfigCreate",
    "GithubConfigRead",
    "GithubConfigUpdate",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PersonalInfoRead",
    "PersonalInfoUpdate",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
    "PublicUser",
    "SkillCreate",
    "SkillRead",
    "SkillUpdate",
    "TestimonialCreate",
    "TestimonialRead",
    "TestimonialUpdate",
    "UploadResponse",
    "VerifyResponse",
    "WebsiteSectionCreate",
    "WebsiteSectionRead",
    "WebsiteSectionUpdate",
]
