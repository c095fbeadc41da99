"""ORM model for property listings."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Numeric, String, Text, func
from sqlalchemy.dialects.postgresql import JSONB, UUID

from offbase_admin.models.base import Base, new_uuid


class Property(Base):
    """Listing submitted by a landlord or realtor; admins approve or reject it."""

    __tablename__ = "properties"

    id = Column(UUID(as_uuid=False), primary_key=True, default=new_uuid)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(14, 2), nullable=True)
    location = Column(String(1024), nullable=True)
    status = Column(String(16), nullable=False, default="PENDING", index=True)
    is_active = Column(Boolean, nullable=False, default=False)
    user_id = Column(
        UUID(as_uuid=False),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    image_urls = Column(JSONB, nullable=False, default=list)
    approval_date = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(DateTime(timezone=True), nullable=True)
