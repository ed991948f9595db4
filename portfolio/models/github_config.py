"""ORM model for GitHub users/repositories shown on the GitHub projects page."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func, true

from portfolio.models.base import Base, utcnow

GITHUB_CONFIG_TYPES = ("user", "repository")


class GithubConfig(Base):
    """
    One display entry. value is a GitHub username when type is 'user',
    or 'owner/repo' when type is 'repository'.
    """

    __tablename__ = "github_configs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    type = Column(String(32), nullable=False)
    value = Column(String(255), nullable=False)
    display_name = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    is_enabled = Column(Boolean, nullable=False, default=True, server_default=true())
    order = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
