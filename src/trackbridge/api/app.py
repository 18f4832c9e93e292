"""FastAPI application factory and configuration."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from rich.console import Console
from rich.logging import RichHandler

from trackbridge import create_resolver
from trackbridge.api.exceptions import register_exception_handlers
from trackbridge.api.routes import convert, health
from trackbridge.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def setup_logging(settings: Settings) -> None:
    """Configure logging with Rich handler for all loggers including uvicorn."""
    console = Console(force_terminal=True)
    handler = RichHandler(
        console=console, rich_tracebacks=True, show_path=False, markup=True
    )
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    # Configure root logger
    logging.root.handlers = [handler]
    logging.root.setLevel(settings.log_level)

    # Request URLs carry the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Configure uvicorn loggers to use Rich
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = [handler]
        uvicorn_logger.propagate = False


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the resolver on startup and close its HTTP client on shutdown."""
    settings: Settings = app.state.settings
    if not settings.youtube_api_key:
        logger.warning("TRACKBRIDGE_YOUTUBE_API_KEY not set, using oEmbed only")

    async with create_resolver(settings.resolver_config()) as resolver:
        app.state.resolver = resolver
        logger.info("Resolver initialized")
        yield


def create_api_router() -> APIRouter:
    """Create the API router with all routes under /api prefix."""
    api_router = APIRouter(prefix="/api")
    api_router.include_router(health.router)
    api_router.include_router(convert.router)
    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the main FastAPI application."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title="trackbridge",
        description="YouTube to music service track resolver API",
        version=version("trackbridge"),
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(create_api_router())
    return app
