"""Pydantic schemas for property administration endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field

PropertyStatus = Literal["PENDING", "APPROVED", "REJECTED"]


class PropertyItem(BaseModel):
    """Listing as returned to admins."""

    model_config = {"from_attributes": True}

    id: str
    title: str
    description: str | None = None
    price: Decimal | None = None
    location: str | None = None
    status: PropertyStatus
    is_active: bool
    user_id: str | None = None
    image_urls: list[str] = Field(default_factory=list)
    approval_date: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PropertiesListResponse(BaseModel):
    """One page of listings, newest first."""

    data: list[PropertyItem]
    count: int = Field(..., ge=0, description="Total listings matching the filter")
    page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)


class PropertyActionResponse(BaseModel):
    """Result of approving or rejecting a listing."""

    success: Literal[True] = True
    data: PropertyItem
    message: str


class PropertyDeleteResponse(BaseModel):
    success: Literal[True] = True
    message: str
    deleted_id: str
