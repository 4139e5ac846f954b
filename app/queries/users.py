"""Statements for the users table."""

from sqlalchemy import insert, select, update
from sqlalchemy.orm import Session

from app.models import User as UserModel
from app.queries.rows import RowMapper
from app.schemas.users import SignupArgs, User

users_table = UserModel.__table__

USER_COLUMNS = (
    users_table.c.user_id,
    users_table.c.username,
    users_table.c.password_hash,
    users_table.c.login_attempts,
    users_table.c.first_name,
    users_table.c.last_name,
    users_table.c.created_at,
)

user_rows = RowMapper(USER_COLUMNS, User)


def get_user_by_id(session: Session, user_id: int) -> User | None:
    stmt = select(*user_rows.columns).where(users_table.c.user_id == user_id)
    return user_rows.one(session.execute(stmt))


def get_user_by_username(session: Session, username: str) -> User | None:
    stmt = select(*user_rows.columns).where(users_table.c.username == username)
    return user_rows.one(session.execute(stmt))


def signup(session: Session, args: SignupArgs) -> User | None:
    """
    Insert a new user with login_attempts = 0 and return the stored row.

    A duplicate username raises sqlalchemy.exc.IntegrityError from the driver.
    """
    stmt = (
        insert(users_table)
        .values(login_attempts=0, **args.model_dump())
        .returning(*user_rows.columns)
    )
    user = user_rows.one(session.execute(stmt))
    session.commit()
    return user


def increment_login_attempts(session: Session, user_id: int) -> None:
    stmt = (
        update(users_table)
        .where(users_table.c.user_id == user_id)
        .values(login_attempts=users_table.c.login_attempts + 1)
    )
    session.execute(stmt)
    session.commit()


def reset_login_attempts(session: Session, user_id: int) -> None:
    stmt = (
        update(users_table)
        .where(users_table.c.user_id == user_id)
        .values(login_attempts=0)
    )
    session.execute(stmt)
    session.commit()
