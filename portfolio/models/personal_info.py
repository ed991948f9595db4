"""ORM model for the site owner's profile. Singleton: at most one row is used."""

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from portfolio.models.base import Base, utcnow


class PersonalInfo(Base):
    __tablename__ = "personal_info"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    title = Column(String(255), nullable=False)
    bio = Column(Text, nullable=True)
    email = Column(String(320), nullable=True)
    phone = Column(String(64), nullable=True)
    location = Column(String(255), nullable=True)
    profile_image = Column(String(2048), nullable=True)
    resume_url = Column(String(2048), nullable=True)
    linkedin_url = Column(String(2048), nullable=True)
    github_url = Column(String(2048), nullable=True)
    twitter_url = Column(String(2048), nullable=True)
    website_url = Column(String(2048), nullable=True)
    years_of_experience = Column(Integer, nullable=True)
    current_role = Column(String(255), nullable=True)
    company = Column(String(255), nullable=True)
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
