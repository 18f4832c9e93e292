"""Conversion API schemas."""

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    """Request body for the conversion endpoints."""

    url: str = Field(min_length=1, description="YouTube video or playlist URL")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
