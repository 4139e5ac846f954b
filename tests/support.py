"""Shared helpers: an in-memory SQLite database built from the ORM metadata."""

from sqlalchemy.pool import StaticPool

from app.core.database import Database
from app.models import Base
from app.schemas.beans import BeanCreate


def make_database() -> Database:
    """Fresh in-memory database with the users and coffee_beans tables."""
    database = Database(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(database.engine)
    return database


def bean_args(name: str = "Yirgacheffe", **kwargs: object) -> BeanCreate:
    """Build a BeanCreate with every optional field filled in."""
    defaults = {
        "origin": "Ethiopia",
        "roast_level": "light",
        "image_url": "https://example.com/yirgacheffe.png",
        "price_per_kg": "24.50",
        "stock_quantity": 12,
        "description": "Floral, citrus, tea-like body.",
    }
    defaults.update(kwargs)
    return BeanCreate(name=name, **defaults)
