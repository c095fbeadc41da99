"""Request/response schemas for admin auth endpoints and session claims."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

AdminStatus = Literal["PENDING", "APPROVED", "REJECTED"]

UserRole = Literal["ADMIN", "LANDLORD", "REALTOR", "USER"]


class Credentials(BaseModel):
    """Email and password body shared by login and signup.

    Both fields accept any JSON value so that missing, non-string or over-long
    values are reported as 400 by the handler instead of a 422 from body validation.
    """

    model_config = {"extra": "ignore"}

    email: Any = Field(default=None, description="Admin email")
    password: Any = Field(default=None, description="Password")


class LoginRequest(Credentials):
    """Credentials for admin login."""


class SignupRequest(Credentials):
    """Credentials for an admin registration request."""


class AdminIdentity(BaseModel):
    """Public admin identity (never includes the password hash)."""

    id: str
    email: str


class LoginResponse(BaseModel):
    """Successful login; the session token is set as a cookie, not returned."""

    success: Literal[True] = True
    admin: AdminIdentity


class SignupResponse(BaseModel):
    """Registration accepted; the account stays PENDING until approved."""

    success: Literal[True] = True
    message: str


class LogoutResponse(BaseModel):
    success: Literal[True] = True


class CurrentAdmin(BaseModel):
    """Identity of the admin holding the session cookie, with the live privilege flag."""

    id: str
    email: str
    is_super_admin: bool = False


class SessionClaims(BaseModel):
    """Decoded claims of a verified admin session token."""

    model_config = {"frozen": True}

    id: str = Field(..., min_length=1)
    email: str
    is_super_admin: bool = False
    issued_at: datetime
    expires_at: datetime
