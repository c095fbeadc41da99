"""Health check endpoint with optional database connectivity check."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from offbase_admin.core.config import settings
from offbase_admin.core.database import database_reachable, get_db
from offbase_admin.core.security import SessionTokenCodec, get_token_codec
from offbase_admin.schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
def get_health(
    db: Annotated[Session, Depends(get_db)],
    codec: Annotated[SessionTokenCodec, Depends(get_token_codec)],
) -> HealthResponse:
    """
    Return service health, database branch and connectivity.
    Used by load balancers and monitoring.
    """
    db_status = "connected" if database_reachable(db) else "disconnected"

    return HealthResponse(
        status="ok",
        environment=settings.APP_ENV,
        branch=settings.SUPABASE_BRANCH,
        sessions_enabled=codec.configured,
        database=db_status,
    )
