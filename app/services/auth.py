"""
Signup, login with attempt throttling, and bearer-token authentication.

The login sequence reads the attempt counter and later updates it in separate
statements; two concurrent logins for the same account can interleave between
the check and the update.
"""

import logging
from dataclasses import dataclass

from fastapi import status
from sqlalchemy.orm import Session

from app.core.security import (
    PASSWORD_MAX_BYTES,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    create_access_token,
    hash_password,
    password_length_ok,
    user_id_from_authorization,
    verify_password,
)
from app.queries import users as user_queries
from app.schemas.auth import LoginRequest, SignupRequest
from app.schemas.users import PublicUser, SignupArgs

logger = logging.getLogger(__name__)

# More than this many consecutive failures locks the account until a reset.
MAX_LOGIN_ATTEMPTS = 3

MISSING_CREDENTIALS = "username and password are required"
INVALID_USERNAME = "invalid username"
TOO_MANY_ATTEMPTS = "too many login attempts"
INVALID_CREDENTIALS = "invalid credentials"
SIGNUP_FAILED = "unable to sign up user"
INVALID_USERNAME_LENGTH = f"username must be at most {USERNAME_MAX_LEN} characters"
INVALID_PASSWORD_LENGTH = (
    f"password must be at least {PASSWORD_MIN_LEN} characters and at most {PASSWORD_MAX_BYTES} bytes"
)
NOT_AUTHENTICATED = "Not authenticated"
INVALID_TOKEN = "Invalid or expired token"


class AuthFlowError(Exception):
    """Raised when signup, login or token authentication is rejected. message is safe to show clients."""

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful signup or login."""

    user: PublicUser
    token: str


def _require_credentials(username: str | None, password: str | None) -> tuple[str, str]:
    if not username or not username.strip() or not password:
        raise AuthFlowError(MISSING_CREDENTIALS)
    return username.strip(), password


def signup(session: Session, body: SignupRequest) -> AuthResult:
    """
    Create a user and return it with an access token.

    A duplicate username is not turned into a rejection here: the insert's
    IntegrityError propagates to the caller like any other data-layer fault.
    """
    username, password = _require_credentials(body.username, body.password)
    if len(username) > USERNAME_MAX_LEN:
        raise AuthFlowError(INVALID_USERNAME_LENGTH)
    if not password_length_ok(password):
        raise AuthFlowError(INVALID_PASSWORD_LENGTH)

    user = user_queries.signup(
        session,
        SignupArgs(
            username=username,
            password_hash=hash_password(password),
            first_name=body.first_name,
            last_name=body.last_name,
        ),
    )
    if user is None:
        logger.warning("Signup insert returned no row")
        raise AuthFlowError(SIGNUP_FAILED)

    logger.info("User signed up: user_id=%s", user.user_id)
    return AuthResult(
        user=PublicUser.from_user(user),
        token=create_access_token(user.user_id),
    )


def login(session: Session, body: LoginRequest) -> AuthResult:
    """
    Check credentials and return the user with an access token.

    The lockout check happens before the password is verified, so a locked
    account never reveals whether the supplied password was right.
    """
    username, password = _require_credentials(body.username, body.password)

    user = user_queries.get_user_by_username(session, username)
    if user is None:
        raise AuthFlowError(INVALID_USERNAME)

    if user.login_attempts > MAX_LOGIN_ATTEMPTS:
        logger.warning("Login refused for locked account: user_id=%s", user.user_id)
        raise AuthFlowError(TOO_MANY_ATTEMPTS)

    if not verify_password(password, user.password_hash):
        user_queries.increment_login_attempts(session, user.user_id)
        logger.info(
            "Failed login: user_id=%s attempts=%s",
            user.user_id,
            user.login_attempts + 1,
        )
        raise AuthFlowError(INVALID_CREDENTIALS)

    user_queries.reset_login_attempts(session, user.user_id)
    logger.info("User logged in: user_id=%s", user.user_id)
    public = PublicUser.from_user(user).model_copy(update={"login_attempts": 0})
    return AuthResult(user=public, token=create_access_token(user.user_id))


def authenticate(authorization: str | None) -> int:
    """Resolve an Authorization header value to a user id, or raise a 401 AuthFlowError."""
    if not authorization:
        raise AuthFlowError(NOT_AUTHENTICATED, status.HTTP_401_UNAUTHORIZED)
    user_id = user_id_from_authorization(authorization)
    if user_id is None:
        raise AuthFlowError(INVALID_TOKEN, status.HTTP_401_UNAUTHORIZED)
    return user_id
