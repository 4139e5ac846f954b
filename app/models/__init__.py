"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.coffee_bean import CoffeeBean
from app.models.user import User

__all__ = ["Base", "CoffeeBean", "User"]
