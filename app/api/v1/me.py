"""Beans owned by the authenticated user."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user_id
from app.core.database import get_db
from app.queries import beans as bean_queries
from app.schemas.beans import (
    BeanCreate,
    BeanDeletedResponse,
    BeanResponse,
    BeansResponse,
)

router = APIRouter()


@router.get("/beans", response_model=BeansResponse)
def get_my_beans(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> BeansResponse:
    """Return the beans owned by the caller."""
    return BeansResponse(beans=bean_queries.list_beans_for_user(db, user_id))


@router.post("/beans", response_model=BeanResponse)
def post_my_bean(
    body: BeanCreate,
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> BeanResponse:
    """Create a bean owned by the caller."""
    return BeanResponse(bean=bean_queries.create_user_bean(db, user_id, body))


@router.delete("/beans/{bean_id}", response_model=BeanDeletedResponse)
def delete_my_bean(
    bean_id: int,
    user_id: Annotated[int, Depends(get_current_user_id)],
    db: Annotated[Session, Depends(get_db)],
) -> BeanDeletedResponse:
    """
    Delete one of the caller's beans.

    Responds the same way whether or not a bean matched: a bean id that is
    missing or owned by someone else is left untouched.
    """
    bean_queries.delete_user_bean(db, bean_id, user_id)
    return BeanDeletedResponse(bean_id=bean_id)
