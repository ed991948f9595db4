"""ORM model for free-form website content sections."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text, func, true

from portfolio.models.base import Base, utcnow


class WebsiteSection(Base):
    """
    A content block rendered by the client, addressed by its unique section_key.

    section_type: 'hero', 'about', 'services', 'cta', 'card', 'grid', 'timeline', 'custom'
    layout: 'horizontal', 'vertical', 'grid'
    target_page: 'regular', 'freelance'
    custom_data: JSON string interpreted by the client
    """

    __tablename__ = "website_sections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    section_key = Column(String(255), nullable=False, unique=True, index=True)
    title = Column(String(255), nullable=False)
    subtitle = Column(String(1024), nullable=True)
    content = Column(Text, nullable=True)
    image_url = Column(String(2048), nullable=True)
    button_text = Column(String(255), nullable=True)
    button_url = Column(String(2048), nullable=True)
    order = Column(Integer, nullable=False, default=0, server_default="0")
    is_active = Column(Boolean, nullable=False, default=True, server_default=true())
    section_type = Column(String(32), nullable=False)
    layout = Column(String(32), nullable=False, default="vertical", server_default="vertical")
    target_page = Column(String(32), nullable=False, default="regular", server_default="regular")
    columns = Column(Integer, nullable=False, default=1, server_default="1")
    gap = Column(String(32), nullable=False, default="medium", server_default="medium")
    custom_data = Column(Text, nullable=True)
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
