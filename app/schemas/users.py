"""Pydantic records for users as read from and written to the users table."""

from datetime import datetime

from pydantic import BaseModel


class User(BaseModel):
    """A users row, including the password digest. Never returned to clients."""

    user_id: int
    username: str
    password_hash: str
    login_attempts: int
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime | None = None


class PublicUser(BaseModel):
    """A user as returned to clients (no password digest)."""

    user_id: int
    username: str
    login_attempts: int
    first_name: str | None = None
    last_name: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_user(cls, user: User) -> "PublicUser":
        return cls.model_validate(user.model_dump(exclude={"password_hash"}))


class SignupArgs(BaseModel):
    """Values inserted by the signup statement; the password is already hashed."""

    username: str
    password_hash: str
    first_name: str | None = None
    last_name: str | None = None
