"""Page routes behind the authorization gate: login page and admin dashboard."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from offbase_admin.core.config import settings
from offbase_admin.core.database import get_db
from offbase_admin.schemas.dashboard import DashboardResponse, LoginPageResponse
from offbase_admin.services.dashboard import build_dashboard

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/auth/login", response_model=LoginPageResponse)
def login_page() -> LoginPageResponse:
    """Reached only without a valid session; points clients at the login API."""
    return LoginPageResponse(
        login_endpoint=f"{settings.API_V1_PREFIX}/admin/auth/login",
        signup_endpoint=f"{settings.API_V1_PREFIX}/admin/signup",
    )


@router.get("/admin", response_model=DashboardResponse)
def admin_dashboard(db: Annotated[Session, Depends(get_db)]) -> DashboardResponse:
    """Dashboard counts. The gate has already checked the session and ADMIN role."""
    try:
        return build_dashboard(db)
    except SQLAlchemyError:
        logger.exception("Building dashboard failed")
        raise HTTPException(status_code=500, detail="Internal server error.")
