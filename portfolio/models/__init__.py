"""SQLAlchemy ORM models."""

from portfolio.models.base import Base
from portfolio.models.contact import Contact
from portfolio.models.github_config import GithubConfig
from portfolio.models.personal_info import PersonalInfo
from portfolio.models.project import Project
from portfolio.models.skill import Skill
from portfolio.models.testimonial import Testimonial
from portfolio.models.user import User
from portfolio.models.website_section import WebsiteSection

__all__ = [
    "Base",
    "Contact",
    "GithubConfig",
    "PersonalInfo",
    "Project",
    "Skill",
    "Testimonial",
    "User",
    "WebsiteSection",
]
