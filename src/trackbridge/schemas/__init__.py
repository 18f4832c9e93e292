"""Request and response schemas for the HTTP API."""

from trackbridge.schemas.convert import ConvertRequest, HealthResponse

__all__ = [
    "ConvertRequest",
    "HealthResponse",
]
