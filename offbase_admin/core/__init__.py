"""Core app configuration, database and session security."""

from offbase_admin.core.config import get_settings, settings
from offbase_admin.core.database import get_db
from offbase_admin.core.security import get_token_codec

__all__ = ["get_settings", "settings", "get_db", "get_token_codec"]
