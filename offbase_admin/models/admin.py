"""ORM model for administrative accounts (email/password login with approval)."""

from sqlalchemy import Boolean, Column, DateTime, String, func
from sqlalchemy.dialects.postgresql import UUID

from offbase_admin.models.base import Base, new_uuid


class Admin(Base):
    """
    Admin account for the back office.

    status: 'PENDING' (after signup), 'APPROVED' or 'REJECTED'. Only APPROVED
    admins may obtain a session. is_super_admin marks elevated privileges.
    """

    __tablename__ = "admins"

    id = Column(UUID(as_uuid=False), primary_key=True, default=new_uuid)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    status = Column(String(16), nullable=False, default="PENDING")
    is_super_admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    approved_at = Column(DateTime(timezone=True), nullable=True)
