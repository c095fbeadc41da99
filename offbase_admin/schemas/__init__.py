"""Pydantic request/response schemas."""

from offbase_admin.schemas.auth import (
    AdminIdentity,
    CurrentAdmin,
    LoginRequest,
    LoginResponse,
    SessionClaims,
    SignupRequest,
    SignupResponse,
)
from offbase_admin.schemas.health import HealthResponse

__all__ = [
    "AdminIdentity",
    "CurrentAdmin",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "SessionClaims",
    "SignupRequest",
    "SignupResponse",
]
