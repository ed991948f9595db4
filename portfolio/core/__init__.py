"""Core app configuration and database."""

from portfolio.core.config import get_settings, settings
from portfolio.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
