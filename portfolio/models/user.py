"""ORM model for admin accounts (credential store)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, false, func

from portfolio.models.base import Base, utcnow


class User(Base):
    """
    User account for JWT authentication.

    Only users with is_admin set can log in. Rows are created by the
    create_user script; there is no registration endpoint.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(320), nullable=False, unique=True)
    is_admin = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
    )
