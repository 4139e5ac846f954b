"""Statements for the coffee_beans table."""

import logging
from decimal import Decimal

from sqlalchemy import delete, insert, select
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.models import CoffeeBean
from app.queries.rows import RowMapper
from app.schemas.beans import Bean, BeanCreate

logger = logging.getLogger(__name__)

beans_table = CoffeeBean.__table__

BEAN_COLUMNS = (
    beans_table.c.bean_id,
    beans_table.c.user_id,
    beans_table.c.name,
    beans_table.c.origin,
    beans_table.c.roast_level,
    beans_table.c.image_url,
    beans_table.c.price_per_kg,
    beans_table.c.stock_quantity,
    beans_table.c.description,
)

bean_rows = RowMapper(BEAN_COLUMNS, Bean)


def list_beans(session: Session) -> list[Bean]:
    """All beans, in database order."""
    return bean_rows.all(session.execute(select(*bean_rows.columns)))


def list_beans_for_user(session: Session, user_id: int) -> list[Bean]:
    """Beans owned by user_id."""
    stmt = select(*bean_rows.columns).where(beans_table.c.user_id == user_id)
    return bean_rows.all(session.execute(stmt))


def _insert_bean(session: Session, owner_id: int, args: BeanCreate) -> Bean | None:
    values = args.model_dump()
    if values["price_per_kg"] is not None:
        values["price_per_kg"] = Decimal(values["price_per_kg"])
    stmt = (
        insert(beans_table)
        .values(user_id=owner_id, **values)
        .returning(*bean_rows.columns)
    )
    bean = bean_rows.one(session.execute(stmt))
    session.commit()
    return bean


def create_bean(session: Session, args: BeanCreate) -> Bean | None:
    """
    Insert a bean into the global catalog, owned by the configured system user.

    Returns the inserted row, or None if the insert returned no row.
    """
    bean = _insert_bean(session, get_settings().SYSTEM_USER_ID, args)
    if bean is not None:
        logger.info("Created catalog bean: bean_id=%s", bean.bean_id)
    return bean


def create_user_bean(session: Session, user_id: int, args: BeanCreate) -> Bean | None:
    """Insert a bean owned by user_id. Returns the inserted row, or None if none came back."""
    bean = _insert_bean(session, user_id, args)
    if bean is not None:
        logger.info("Created user bean: bean_id=%s user_id=%s", bean.bean_id, user_id)
    return bean


def delete_user_bean(session: Session, bean_id: int, user_id: int) -> None:
    """
    Delete the bean matching both bean_id and user_id.

    A bean owned by someone else (or missing) is left alone and no error is raised;
    callers cannot tell a delete from a no-op.
    """
    stmt = delete(beans_table).where(
        beans_table.c.bean_id == bean_id,
        beans_table.c.user_id == user_id,
    )
    session.execute(stmt)
    session.commit()
    logger.info("Delete requested: bean_id=%s user_id=%s", bean_id, user_id)
