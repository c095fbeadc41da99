"""Password hashing and signed admin session tokens."""

import logging
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any

import bcrypt
import jwt
from pydantic import ValidationError

from offbase_admin.core.config import get_settings
from offbase_admin.schemas.auth import SessionClaims

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72

ADMIN_COOKIE_NAME = "admin-token"
SESSION_EXPIRE_HOURS = 24

REQUIRED_CLAIMS = ["exp", "iat", "id", "email"]


class SessionSecretMissingError(Exception):
    """Raised when a session token is requested but no signing secret is configured."""

    def __init__(self, message: str = "ADMIN_JWT_SECRET is not configured") -> None:
        self.message = message
        super().__init__(message)


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str | None) -> bool:
    """Verify a plain password against a stored hash. False on any mismatch or bad hash."""
    if not hashed:
        return False
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


class SessionTokenCodec:
    """
    Issue and verify HMAC-signed admin session tokens.

    Verification is stateless: a token is valid when its signature matches the
    configured secret and its expiry lies in the future. A codec built without a
    secret issues nothing and rejects everything.
    """

    def __init__(
        self,
        secret: str | None,
        algorithm: str = "HS256",
        expire_hours: int = SESSION_EXPIRE_HOURS,
    ) -> None:
        self._secret = secret or None
        self.algorithm = algorithm
        self.expire_hours = expire_hours

    @property
    def configured(self) -> bool:
        return self._secret is not None

    def issue(self, admin_id: str, email: str, is_super_admin: bool = False) -> str:
        """Sign {id, email, is_super_admin} with iat and an exp of expire_hours from now."""
        if self._secret is None:
            raise SessionSecretMissingError()
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "id": str(admin_id),
            "email": email,
            "is_super_admin": bool(is_super_admin),
            "iat": now,
            "exp": now + timedelta(hours=self.expire_hours),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str | None) -> SessionClaims | None:
        """Return the token's claims if signature and expiry hold, else None. Never raises."""
        if not token or self._secret is None:
            return None
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.PyJWTError:
            return None
        try:
            return SessionClaims(
                id=payload["id"],
                email=payload["email"],
                is_super_admin=payload.get("is_super_admin", False),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
            )
        except (ValidationError, TypeError, ValueError, OverflowError):
            return None


@lru_cache
def get_token_codec() -> SessionTokenCodec:
    """Process-wide codec built once from settings (dependency-injectable)."""
    settings = get_settings()
    secret = settings.ADMIN_JWT_SECRET
    if secret is None:
        logger.warning(
            "ADMIN_JWT_SECRET is not set; admin sessions cannot be issued and all tokens are rejected"
        )
    return SessionTokenCodec(
        secret.get_secret_value() if secret is not None else None,
        algorithm=settings.JWT_ALGORITHM,
        expire_hours=settings.SESSION_EXPIRE_HOURS,
    )
