"""ORM model for client testimonials."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func, true

from portfolio.models.base import Base, utcnow


class Testimonial(Base):
    """Testimonial shown on the public site while is_active is set."""

    __tablename__ = "testimonials"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    company = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    rating = Column(Integer, nullable=False)
    avatar_url = Column(String(2048), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
