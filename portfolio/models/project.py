"""ORM model for portfolio projects."""

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text, false, func
from sqlalchemy.dialects.postgresql import JSONB

from portfolio.models.base import Base, utcnow

PROJECT_CATEGORIES = ("regular", "freelance")


class Project(Base):
    """A showcased project; category separates regular work from freelance work."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    long_description = Column(Text, nullable=True)
    image_url = Column(String(2048), nullable=True)
    technologies = Column(JSON().with_variant(JSONB, "postgresql"), nullable=True)
    github_url = Column(String(2048), nullable=True)
    live_url = Column(String(2048), nullable=True)
    category = Column(String(32), nullable=False, index=True)
    featured = Column(Boolean, nullable=False, default=False, server_default=false())
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
