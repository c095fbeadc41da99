"""SQLAlchemy ORM models."""

from offbase_admin.models.admin import Admin
from offbase_admin.models.base import Base
from offbase_admin.models.property import Property
from offbase_admin.models.role_request import RoleUpgradeRequest
from offbase_admin.models.user import User, UserVerificationDocument

__all__ = [
    "Admin",
    "Base",
    "Property",
    "RoleUpgradeRequest",
    "User",
    "UserVerificationDocument",
]
