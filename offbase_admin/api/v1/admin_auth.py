"""Admin login, signup, logout and current-identity endpoints, plus the session dependency."""

import logging
from typing import Annotated

from fastapi import APIRouter, Cookie, Depends, HTTPException, Request, Response, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from offbase_admin.core.config import get_settings
from offbase_admin.core.database import get_db
from offbase_admin.core.security import (
    ADMIN_COOKIE_NAME,
    SessionSecretMissingError,
    SessionTokenCodec,
    get_token_codec,
    hash_password,
    verify_password,
)
from offbase_admin.schemas.auth import (
    AdminIdentity,
    CurrentAdmin,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    SessionClaims,
    SignupRequest,
    SignupResponse,
)
from offbase_admin.services.accounts import (
    admin_email_exists,
    create_pending_admin,
    get_admin_by_email,
    get_admin_by_id,
)

logger = logging.getLogger(__name__)
router = APIRouter()

# Unknown email and wrong password share one message so accounts cannot be enumerated.
INVALID_CREDENTIALS = "Invalid email or password."
MISSING_CREDENTIALS = "Email and password are required."
MALFORMED_CREDENTIALS = "Email and password must be text within the allowed length."
APPROVAL_PENDING = "Admin approval is pending."
APPROVAL_REJECTED = "Admin approval was rejected."
EMAIL_TAKEN = "Email is already registered."
SIGNUP_ACCEPTED = "Admin registration received. The account is awaiting approval."
SIGNUP_FAILED = "Could not create admin account."
SERVER_ERROR = "Internal server error."

SESSION_COOKIE_MAX_AGE = 60 * 60 * 24

EMAIL_MAX_LENGTH = 255
PASSWORD_MAX_LENGTH = 128


def _require_credentials(body: LoginRequest | SignupRequest) -> tuple[str, str]:
    if body.email is None or body.password is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MISSING_CREDENTIALS,
        )
    if not isinstance(body.email, str) or not isinstance(body.password, str):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MALFORMED_CREDENTIALS,
        )
    email = body.email.strip()
    password = body.password
    if not email or not password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MISSING_CREDENTIALS,
        )
    if len(email) > EMAIL_MAX_LENGTH or len(password) > PASSWORD_MAX_LENGTH:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MALFORMED_CREDENTIALS,
        )
    return email, password


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=ADMIN_COOKIE_NAME,
        value=token,
        max_age=SESSION_COOKIE_MAX_AGE,
        path="/",
        httponly=True,
        secure=get_settings().cookie_secure,
        samesite="lax",
    )


@router.post("/auth/login", response_model=LoginResponse)
def login(
    body: LoginRequest,
    response: Response,
    db: Annotated[Session, Depends(get_db)],
    codec: Annotated[SessionTokenCodec, Depends(get_token_codec)],
) -> LoginResponse:
    """
    Authenticate an approved admin with email and password.

    On success the signed session token is set as the HTTP-only `admin-token`
    cookie; the body only carries the admin's id and email.
    """
    email, password = _require_credentials(body)

    try:
        admin = get_admin_by_email(db, email)
    except SQLAlchemyError:
        logger.exception("Admin lookup failed during login")
        raise HTTPException(status_code=500, detail=SERVER_ERROR)

    if admin is None:
        logger.info("Admin login failed", extra={"reason": "unknown_email"})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )
    if admin.status == "PENDING":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=APPROVAL_PENDING)
    if admin.status != "APPROVED":
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=APPROVAL_REJECTED)
    if not verify_password(password, admin.password_hash):
        logger.info("Admin login failed", extra={"reason": "bad_password", "admin_id": admin.id})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS,
        )

    try:
        token = codec.issue(admin.id, admin.email)
    except SessionSecretMissingError:
        logger.exception("Cannot issue admin session")
        raise HTTPException(status_code=500, detail=SERVER_ERROR)

    _set_session_cookie(response, token)
    logger.info("Admin logged in", extra={"admin_id": admin.id})
    return LoginResponse(admin=AdminIdentity(id=str(admin.id), email=admin.email))


@router.post("/auth/logout", response_model=LogoutResponse)
def logout(response: Response) -> LogoutResponse:
    """Clear the session cookie. Tokens are stateless, so nothing is revoked server-side."""
    response.delete_cookie(key=ADMIN_COOKIE_NAME, path="/")
    return LogoutResponse()


@router.post("/signup", response_model=SignupResponse)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
) -> SignupResponse:
    """
    Register a new admin in PENDING state. No session is issued; the account
    becomes usable once it is approved.
    """
    email, password = _require_credentials(body)

    try:
        if admin_email_exists(db, email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=EMAIL_TAKEN)
        admin = create_pending_admin(db, email, hash_password(password))
    except SQLAlchemyError:
        # Includes the unique-index violation of a concurrent signup with the same email.
        logger.exception("Error creating admin")
        raise HTTPException(status_code=500, detail=SIGNUP_FAILED)

    logger.info("Admin signup accepted", extra={"admin_id": admin.id})
    return SignupResponse(message=SIGNUP_ACCEPTED)


def get_current_admin(
    codec: Annotated[SessionTokenCodec, Depends(get_token_codec)],
    admin_token: Annotated[str | None, Cookie(alias=ADMIN_COOKIE_NAME)] = None,
) -> SessionClaims:
    """Dependency: require a valid admin session cookie. Raises 401 if missing, tampered or expired."""
    claims = codec.verify(admin_token)
    if claims is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return claims


@router.get("/current", response_model=CurrentAdmin)
def current_admin(
    claims: Annotated[SessionClaims, Depends(get_current_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentAdmin:
    """
    Identity behind the session cookie. The privilege flag is re-read from the
    store because the token's copy may be stale.
    """
    is_super_admin = False
    try:
        admin = get_admin_by_id(db, claims.id)
    except SQLAlchemyError:
        logger.exception("Admin lookup failed for current identity")
        admin = None
    if admin is not None:
        is_super_admin = bool(admin.is_super_admin)
    return CurrentAdmin(id=claims.id, email=claims.email, is_super_admin=is_super_admin)


async def credentials_body_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report an unparseable login or signup body as 400; other routes keep FastAPI's 422."""
    if request.scope.get("endpoint") in (login, signup):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": MISSING_CREDENTIALS},
        )
    return await request_validation_exception_handler(request, exc)
