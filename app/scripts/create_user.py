"""
Create a user (e.g. the system user that owns the global catalog). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [--first-name NAME] [--last-name NAME]
Example:
  python -m app.scripts.create_user catalog your-secure-password --first-name Catalog
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import Database
from app.core.security import (
    PASSWORD_MAX_BYTES,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    hash_password,
    password_length_ok,
)
from app.queries import users as user_queries
from app.schemas.users import SignupArgs

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, database: Database | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a coffee beans API user.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}+ chars, at most {PASSWORD_MAX_BYTES} bytes)")
    parser.add_argument("--first-name", default=None)
    parser.add_argument("--last-name", default=None)
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not password_length_ok(args.password):
        print(
            f"Password must be at least {PASSWORD_MIN_LEN} characters and at most {PASSWORD_MAX_BYTES} bytes.",
            file=sys.stderr,
        )
        return 1

    if database is None:
        database = Database(get_settings().DATABASE_URL)
    db = database.session()
    try:
        if user_queries.get_user_by_username(db, username) is not None:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        user = user_queries.signup(
            db,
            SignupArgs(
                username=username,
                password_hash=hash_password(args.password),
                first_name=args.first_name,
                last_name=args.last_name,
            ),
        )
        if user is None:
            print(f"Unable to create user '{username}'.", file=sys.stderr)
            return 1
        logger.info("Created user: user_id=%s", user.user_id)
        print(f"Created user '{username}' with id {user.user_id}.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
