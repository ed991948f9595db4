"""ORM model for skills listed on the site."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func, true

from portfolio.models.base import Base, utcnow


class Skill(Base):
    """
    A skill badge. icon is a client-side icon name and color a CSS class.

    category: e.g. 'frontend', 'backend', 'data', 'devops'
    """

    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    icon = Column(String(255), nullable=False)
    color = Column(String(255), nullable=False)
    category = Column(String(64), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    order = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
