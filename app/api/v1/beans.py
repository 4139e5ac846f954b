"""Global catalog endpoints: list every bean and add unowned beans."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.queries import beans as bean_queries
from app.schemas.beans import BeanCreate, BeanResponse, BeansResponse

router = APIRouter()


@router.get("", response_model=BeansResponse)
def get_beans(db: Annotated[Session, Depends(get_db)]) -> BeansResponse:
    """Return every coffee bean in the catalog."""
    return BeansResponse(beans=bean_queries.list_beans(db))


@router.post("", response_model=BeanResponse)
def post_bean(
    body: BeanCreate,
    db: Annotated[Session, Depends(get_db)],
) -> BeanResponse:
    """Add a bean to the global catalog (owned by the system user)."""
    return BeanResponse(bean=bean_queries.create_bean(db, body))
