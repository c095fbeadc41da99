"""Admin listing of role-upgrade requests."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from offbase_admin.api.v1.admin_auth import get_current_admin
from offbase_admin.core.database import get_db
from offbase_admin.schemas.auth import SessionClaims
from offbase_admin.schemas.role_requests import RequestStatusFilter, RoleRequestsResponse
from offbase_admin.services.role_requests import list_role_requests

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=RoleRequestsResponse)
def get_role_requests(
    _admin: Annotated[SessionClaims, Depends(get_current_admin)],
    db: Annotated[Session, Depends(get_db)],
    page: Annotated[int, Query(ge=1)] = 1,
    status_filter: Annotated[RequestStatusFilter, Query(alias="filter")] = "ALL",
) -> RoleRequestsResponse:
    """Role-upgrade requests, 10 per page, newest first, each with its requesting user."""
    try:
        return list_role_requests(db, page=page, status_filter=status_filter)
    except SQLAlchemyError:
        logger.exception("Error fetching role upgrade requests")
        raise HTTPException(status_code=500, detail="Internal server error.")
