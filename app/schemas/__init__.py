"""Pydantic records, request and response schemas."""

from app.schemas.auth import AuthResponse, LoginRequest, SignupRequest
from app.schemas.beans import (
    Bean,
    BeanCreate,
    BeanDeletedResponse,
    BeanResponse,
    BeansResponse,
)
from app.schemas.health import HealthResponse
from app.schemas.users import PublicUser, SignupArgs, User

__all__ = [
    "AuthResponse",
    "Bean",
    "BeanCreate",
    "BeanDeletedResponse",
    "BeanResponse",
    "BeansResponse",
    "HealthResponse",
    "LoginRequest",
    "PublicUser",
    "SignupArgs",
    "SignupRequest",
    "User",
]
