"""Authorization gate: decide whether a request may reach a page or must be redirected.

Pure decision logic over (path, verified session, role lookup). Transport
concerns (cookies, redirect responses) live in offbase_admin.core.middleware.
"""

import logging
from collections.abc import Callable

from offbase_admin.core.security import SessionTokenCodec
from offbase_admin.schemas.auth import SessionClaims
from offbase_admin.schemas.gate import Allow, GateDecision, RedirectTo

logger = logging.getLogger(__name__)

ROOT_PATH = "/"
LOGIN_PATH = "/auth/login"
ADMIN_HOME = "/admin"
ADMIN_PREFIX = "/admin"
ADMIN_ROLE = "ADMIN"

RoleLookup = Callable[[str], str | None]

ALLOW = Allow()


def _resolve_role(role_lookup: RoleLookup, subject_id: str) -> str | None:
    """Role for subject_id; any lookup failure counts as no role."""
    try:
        return role_lookup(subject_id)
    except Exception:
        logger.exception("Role lookup failed; denying admin access", extra={"subject_id": subject_id})
        return None


def decide(
    path: str,
    session: SessionClaims | None,
    role_lookup: RoleLookup,
) -> GateDecision:
    """
    Map a request to Allow or RedirectTo. Rules are checked in order; first match wins.

    - "/" goes to the admin home with a session, to the login page without.
    - "/auth/login" bounces a logged-in admin home; otherwise it renders.
    - Paths starting with "/admin" need a session whose subject has role ADMIN.
    - Everything else passes through.
    """
    if path == ROOT_PATH:
        return RedirectTo(location=ADMIN_HOME if session is not None else LOGIN_PATH)

    if path == LOGIN_PATH:
        if session is not None:
            return RedirectTo(location=ADMIN_HOME)
        return ALLOW

    if path.startswith(ADMIN_PREFIX):
        if session is None:
            return RedirectTo(location=LOGIN_PATH)
        role = _resolve_role(role_lookup, session.id)
        if role != ADMIN_ROLE:
            logger.info(
                "Admin path denied",
                extra={"path": path, "subject_id": session.id, "role": role},
            )
            return RedirectTo(location=LOGIN_PATH)
        return ALLOW

    return ALLOW


def evaluate(
    path: str,
    token: str | None,
    codec: SessionTokenCodec,
    role_lookup: RoleLookup,
) -> GateDecision:
    """Verify the raw session cookie value, then decide. A bad token is the same as none."""
    return decide(path, codec.verify(token), role_lookup)
