"""Pydantic schemas for role-upgrade request listing."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

RequestStatusFilter = Literal["ALL", "PENDING", "APPROVED", "REJECTED"]


class VerificationDocumentItem(BaseModel):
    """A document the requesting user uploaded to back the role change."""

    model_config = {"from_attributes": True}

    id: str
    document_type: str
    url: str
    status: str
    created_at: datetime | None = None


class RequestingUser(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    email: str
    role: str
    documents: list[VerificationDocumentItem] = Field(default_factory=list)


class RoleRequestItem(BaseModel):
    """A user's request to move to another role, with the requesting user attached."""

    id: str
    user_id: str
    requested_role: str
    status: str
    created_at: datetime | None = None
    user: RequestingUser | None = None


class RoleRequestsResponse(BaseModel):
    data: list[RoleRequestItem]
    count: int = Field(..., ge=0)
    page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
