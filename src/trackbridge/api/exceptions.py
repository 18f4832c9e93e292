"""Error handlers for the API.

All API errors use a consistent response format:
{
    "error": "error_code",
    "message": "Human-readable description"
}
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from trackbridge.exceptions import InvalidUrlError, TrackBridgeError


class ErrorResponse(BaseModel):
    """Standard error response format."""

    error: str
    message: str


# Map core exceptions to machine-readable error codes
_ERROR_CODES: dict[type[TrackBridgeError], str] = {
    InvalidUrlError: "invalid_url",
}


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers on the FastAPI app."""

    @app.exception_handler(TrackBridgeError)
    async def trackbridge_error_handler(
        request: Request, exc: TrackBridgeError
    ) -> JSONResponse:
        """Generic handler for all TrackBridgeError subclasses."""
        error_code = _ERROR_CODES.get(type(exc), "internal_error")
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=error_code, message=exc.message).model_dump(),
        )
