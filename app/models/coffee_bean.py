"""ORM model for catalog coffee beans."""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text

from app.models.base import Base


class CoffeeBean(Base):
    """
    Catalog entry. user_id is the owning user; beans from the global catalog
    path belong to the configured system user.
    """

    __tablename__ = "coffee_beans"

    bean_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.user_id"),
        nullable=True,
        index=True,
    )
    name = Column(String(255), nullable=False)
    origin = Column(String(255), nullable=True)
    roast_level = Column(String(64), nullable=True)
    image_url = Column(String(2048), nullable=True)
    price_per_kg = Column(Numeric(10, 2), nullable=True)
    stock_quantity = Column(Integer, nullable=True)
    description = Column(Text, nullable=True)
