"""Signup and login endpoints, and the bearer-token dependency for owned routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.auth import AuthResponse, LoginRequest, SignupRequest
from app.services import auth as auth_flow
from app.services.auth import AuthFlowError, AuthResult

router = APIRouter()


def _to_http(e: AuthFlowError) -> HTTPException:
    headers = {"WWW-Authenticate": "Bearer"} if e.status_code == status.HTTP_401_UNAUTHORIZED else None
    return HTTPException(status_code=e.status_code, detail=e.message, headers=headers)


def _to_response(result: AuthResult) -> AuthResponse:
    return AuthResponse(user=result.user, token=result.token)


@router.post("/signup", response_model=AuthResponse)
def signup(
    body: SignupRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Create an account and return it with a JWT access token."""
    try:
        result = auth_flow.signup(db, body)
    except AuthFlowError as e:
        raise _to_http(e) from e
    return _to_response(result)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Authenticate with username and password; returns the user and a JWT access token.
    Include the token in the Authorization header as: Bearer <token>

    More than three consecutive failed attempts lock the account.
    """
    try:
        result = auth_flow.login(db, body)
    except AuthFlowError as e:
        raise _to_http(e) from e
    return _to_response(result)


def get_current_user_id(
    authorization: Annotated[str | None, Header()] = None,
) -> int:
    """Dependency: require a valid Bearer JWT and return its user id. Raises 401 if missing or invalid."""
    try:
        return auth_flow.authenticate(authorization)
    except AuthFlowError as e:
        raise _to_http(e) from e
