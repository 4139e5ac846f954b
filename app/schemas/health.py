"""Pydantic schema for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service status and whether the beans database answered a trivial query."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    service: str = Field(default="coffee-beans-api", description="Service name")
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"] = Field(
        description="Database connectivity at the time of the request",
    )
