"""Decision values produced by the authorization gate."""

from typing import Literal

from pydantic import BaseModel, Field


class Allow(BaseModel):
    """Let the request through unchanged."""

    model_config = {"frozen": True}

    kind: Literal["allow"] = "allow"


class RedirectTo(BaseModel):
    """Short-circuit the request with a redirect to `location`."""

    model_config = {"frozen": True}

    kind: Literal["redirect"] = "redirect"
    location: str = Field(..., min_length=1, description="Absolute path to redirect to")


GateDecision = Allow | RedirectTo
