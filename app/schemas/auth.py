"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from app.schemas.users import PublicUser


class LoginRequest(BaseModel):
    """
    Credentials for login. No length limits: every attempt goes through the
    lockout check and the attempt counter. Missing values are rejected with a 400.
    """

    username: str | None = Field(default=None, description="Username")
    password: str | None = Field(default=None, description="Password")


class SignupRequest(BaseModel):
    """New account details."""

    username: str | None = Field(default=None, max_length=255, description="Username")
    password: str | None = Field(default=None, description="Password (8+ characters, at most 72 bytes)")
    first_name: str | None = Field(default=None, max_length=255, description="First name")
    last_name: str | None = Field(default=None, max_length=255, description="Last name")


class AuthResponse(BaseModel):
    """User (without password digest) and a JWT access token."""

    user: PublicUser
    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")
    token_type: str = Field(default="bearer", description="Token type")
