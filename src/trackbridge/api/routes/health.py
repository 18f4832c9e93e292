"""Health check endpoint."""

from fastapi import APIRouter

from trackbridge.schemas.convert import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> HealthResponse:
    """Check API health status."""
    return HealthResponse()
