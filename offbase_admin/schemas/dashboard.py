"""Pydantic schemas for the admin landing pages."""

from pydantic import BaseModel, Field


class DashboardResponse(BaseModel):
    """Counts shown on the admin dashboard."""

    users_by_role: dict[str, int] = Field(default_factory=dict)
    properties_by_status: dict[str, int] = Field(default_factory=dict)
    pending_admins: int = 0


class LoginPageResponse(BaseModel):
    """Discovery payload for the login page."""

    page: str = "login"
    login_endpoint: str
    signup_endpoint: str
