"""ORM models for platform users and their verification documents."""

from sqlalchemy import Column, DateTime, ForeignKey, String, Text, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from offbase_admin.models.base import Base, new_uuid


class User(Base):
    """
    Platform user. Role is fixed at provisioning time.

    role: 'ADMIN', 'LANDLORD', 'REALTOR' or 'USER'
    """

    __tablename__ = "users"

    id = Column(UUID(as_uuid=False), primary_key=True, default=new_uuid)
    email = Column(String(255), nullable=False, index=True)
    role = Column(String(32), nullable=False, default="USER", index=True)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    documents = relationship(
        "UserVerificationDocument",
        back_populates="user",
        cascade="all, delete-orphan",
    )


class UserVerificationDocument(Base):
    """Document a user uploads to prove a role (e.g. realtor license)."""

    __tablename__ = "user_verification_documents"

    id = Column(UUID(as_uuid=False), primary_key=True, default=new_uuid)
    user_id = Column(
        UUID(as_uuid=False),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    document_type = Column(String(64), nullable=False)
    url = Column(Text, nullable=False)
    status = Column(String(16), nullable=False, default="PENDING")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    user = relationship("User", back_populates="documents")
