"""ORM model for user requests to change role (e.g. USER -> REALTOR)."""

from sqlalchemy import Column, DateTime, ForeignKey, String, func
from sqlalchemy.dialects.postgresql import UUID

from offbase_admin.models.base import Base, new_uuid


class RoleUpgradeRequest(Base):
    __tablename__ = "role_upgrade_requests"

    id = Column(UUID(as_uuid=False), primary_key=True, default=new_uuid)
    user_id = Column(
        UUID(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    requested_role = Column(String(32), nullable=False)
    status = Column(String(16), nullable=False, default="PENDING", index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
