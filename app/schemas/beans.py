"""Pydantic schemas for coffee beans: stored record, create request and responses."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

# Up to 8 integer digits and 2 decimals, matching NUMERIC(10, 2).
PRICE_PATTERN = r"^\d{1,8}(\.\d{1,2})?$"
PRICE_QUANTUM = Decimal("0.01")


class Bean(BaseModel):
    """A coffee_beans row. price_per_kg is carried as a decimal string to avoid float drift."""

    bean_id: int
    user_id: int | None = None
    name: str
    origin: str | None = None
    roast_level: str | None = None
    image_url: str | None = None
    price_per_kg: str | None = None
    stock_quantity: int | None = None
    description: str | None = None

    @field_validator("price_per_kg", mode="before")
    @classmethod
    def price_to_str(cls, v: object) -> object:
        if isinstance(v, (Decimal, int, float)):
            return str(v)
        return v


class BeanCreate(BaseModel):
    """Fields accepted when creating a bean; the owner is set by the calling path, never by the client."""

    model_config = {"extra": "ignore"}

    name: str = Field(..., min_length=1, max_length=255, description="Name of the bean")
    origin: str | None = Field(
        default=None,
        max_length=255,
        description="Country or region of origin",
    )
    roast_level: str | None = Field(
        default=None,
        max_length=64,
        description="Level of roast (e.g. light, medium, dark)",
    )
    image_url: str | None = Field(default=None, max_length=2048, description="Image URL")
    price_per_kg: str | None = Field(
        default=None,
        pattern=PRICE_PATTERN,
        description="Price per kilogram as a decimal string, e.g. '12.50'",
    )
    stock_quantity: int | None = Field(
        default=None,
        ge=0,
        description="Available quantity in stock",
    )
    description: str | None = Field(
        default=None,
        description="Detailed description of the coffee bean",
    )

    @field_validator("price_per_kg")
    @classmethod
    def canonical_price(cls, v: str | None) -> str | None:
        """Rewrite the price the way NUMERIC(10, 2) stores it, e.g. '12.5' -> '12.50'."""
        if v is None:
            return None
        return str(Decimal(v).quantize(PRICE_QUANTUM))


class BeansResponse(BaseModel):
    """List of beans."""

    beans: list[Bean]


class BeanResponse(BaseModel):
    """A single created bean; null if the insert returned no row."""

    bean: Bean | None


class BeanDeletedResponse(BaseModel):
    """Acknowledges a delete request. Does not say whether a row matched."""

    bean_id: int
