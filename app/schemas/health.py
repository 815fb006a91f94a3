"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness payload with the result of the database ping."""

    status: Literal["ok"] = Field(default="ok", description="Service status")
    service: str = Field(description="Service name")
    version: str = Field(description="Running API version")
    environment: str = Field(description="Current app environment (dev or prod)")
    database: Literal["connected", "disconnected"] = Field(
        description="Whether the database answered a trivial query"
    )
