"""Password hashing and JWT creation/verification for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings

logger = logging.getLogger(__name__)

# Bcrypt cost (rounds).
BCRYPT_ROUNDS = 10

# Tokens are valid for one hour from issuance.
TOKEN_TTL_SECONDS = 3600

# Authorization header values look like "Bearer <token>"; the prefix is exactly 7 characters.
BEARER_PREFIX = "Bearer "
BEARER_PREFIX_LEN = len(BEARER_PREFIX)

# Length limits enforced at signup. bcrypt only reads 72 bytes, so longer passwords are refused.
USERNAME_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_BYTES = 72


def password_length_ok(plain_password: str) -> bool:
    """True if the password is long enough and fits in bcrypt's 72-byte input."""
    return (
        len(plain_password) >= PASSWORD_MIN_LEN
        and len(plain_password.encode("utf-8")) <= PASSWORD_MAX_BYTES
    )


def hash_password(plain_password: str) -> str:
    """
    Hash a plain-text password for storage. Each call uses a fresh random salt.
    Raises ValueError for passwords over PASSWORD_MAX_BYTES.
    """
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password exceeds {PASSWORD_MAX_BYTES} bytes")
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash; malformed hashes verify as False."""
    pw_bytes = plain_password.encode("utf-8")
    # Signup refuses these, so no stored hash can match one.
    if len(pw_bytes) > PASSWORD_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError, AttributeError):
        return False


def create_access_token(user_id: int, now: datetime | None = None) -> str:
    """Create a JWT whose subject is the user id, expiring TOKEN_TTL_SECONDS after issuance."""
    issued_at = now or datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=TOKEN_TTL_SECONDS),
    }
    return jwt.encode(
        payload,
        settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, exp, iat).
    Raises jwt.PyJWTError on invalid or expired token.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["sub", "exp", "iat"]},
    )


def verify_access_token(token: str) -> int | None:
    """Return the user id carried by a valid token, or None if it is invalid or expired."""
    try:
        payload = decode_access_token(token)
    except jwt.PyJWTError as e:
        logger.debug("Rejected access token: %s", type(e).__name__)
        return None
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        return None


def token_from_authorization(value: str | None) -> str | None:
    """Strip the bearer prefix from an Authorization header value; None if it is absent or malformed."""
    if not value or len(value) < BEARER_PREFIX_LEN:
        return None
    if value[:BEARER_PREFIX_LEN].lower() != BEARER_PREFIX.lower():
        return None
    token = value[BEARER_PREFIX_LEN:].strip()
    return token or None


def user_id_from_authorization(value: str | None) -> int | None:
    """Resolve an Authorization header value to a user id, or None."""
    token = token_from_authorization(value)
    if token is None:
        return None
    return verify_access_token(token)
