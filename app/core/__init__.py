"""Core app configuration, database and error handling."""

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.errors import FieldValidationError

__all__ = ["FieldValidationError", "get_settings", "settings", "get_db"]
