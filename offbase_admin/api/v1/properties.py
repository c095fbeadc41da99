"""Admin property endpoints: list, approve, reject and delete listings."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from offbase_admin.api.v1.admin_auth import get_current_admin
from offbase_admin.core.database import get_db
from offbase_admin.models import Property
from offbase_admin.schemas.auth import SessionClaims
from offbase_admin.schemas.properties import (
    PropertiesListResponse,
    PropertyActionResponse,
    PropertyDeleteResponse,
    PropertyItem,
    PropertyStatus,
)
from offbase_admin.services.properties import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    approve_property,
    delete_property,
    get_property,
    list_properties,
    reject_property,
    total_pages,
)

logger = logging.getLogger(__name__)
router = APIRouter()


def _load_property(db: Session, property_id: str) -> Property:
    try:
        prop = get_property(db, property_id)
    except SQLAlchemyError:
        logger.exception("Property lookup failed", extra={"property_id": property_id})
        raise HTTPException(status_code=500, detail="Internal server error.")
    if prop is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Property not found.")
    return prop


@router.get("", response_model=PropertiesListResponse)
def get_properties(
    _admin: Annotated[SessionClaims, Depends(get_current_admin)],
    db: Annotated[Session, Depends(get_db)],
    status_filter: Annotated[PropertyStatus | None, Query(alias="status")] = None,
    page: Annotated[int, Query(ge=1)] = 1,
    limit: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
) -> PropertiesListResponse:
    """List listings newest first, optionally filtered by status."""
    try:
        rows, count = list_properties(db, status=status_filter, page=page, limit=limit)
    except SQLAlchemyError:
        logger.exception("Listing properties failed")
        raise HTTPException(status_code=500, detail="Internal server error.")
    return PropertiesListResponse(
        data=[PropertyItem.model_validate(r) for r in rows],
        count=count,
        page=page,
        total_pages=total_pages(count, limit),
    )


@router.post("/{property_id}/approve", response_model=PropertyActionResponse)
def post_approve_property(
    property_id: str,
    admin: Annotated[SessionClaims, Depends(get_current_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> PropertyActionResponse:
    """Approve a listing and make it active."""
    prop = _load_property(db, property_id)
    try:
        prop = approve_property(db, prop)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Approving property failed", extra={"property_id": property_id})
        raise HTTPException(status_code=500, detail="Internal server error.")
    logger.info("Property approved", extra={"property_id": property_id, "admin_id": admin.id})
    return PropertyActionResponse(
        data=PropertyItem.model_validate(prop),
        message="Property approved.",
    )


@router.post("/{property_id}/reject", response_model=PropertyActionResponse)
def post_reject_property(
    property_id: str,
    admin: Annotated[SessionClaims, Depends(get_current_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> PropertyActionResponse:
    """Reject a listing and deactivate it."""
    prop = _load_property(db, property_id)
    try:
        prop = reject_property(db, prop)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Rejecting property failed", extra={"property_id": property_id})
        raise HTTPException(status_code=500, detail="Internal server error.")
    logger.info("Property rejected", extra={"property_id": property_id, "admin_id": admin.id})
    return PropertyActionResponse(
        data=PropertyItem.model_validate(prop),
        message="Property rejected.",
    )


@router.delete("/{property_id}", response_model=PropertyDeleteResponse)
def delete_property_endpoint(
    property_id: str,
    admin: Annotated[SessionClaims, Depends(get_current_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> PropertyDeleteResponse:
    """Delete a listing permanently."""
    prop = _load_property(db, property_id)
    try:
        delete_property(db, prop)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Deleting property failed", extra={"property_id": property_id})
        raise HTTPException(status_code=500, detail="Internal server error.")
    logger.info("Property deleted", extra={"property_id": property_id, "admin_id": admin.id})
    return PropertyDeleteResponse(message="Property deleted.", deleted_id=property_id)
