import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from spotify_gateway.config import Settings, get_settings
from spotify_gateway.core.exceptions import GatewayException, gateway_exception_handler
from spotify_gateway.routers import artist

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the gateway application around an explicit settings object."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Lifespan context manager for startup/shutdown events.
        """
        # Startup
        logger.info(f"🚀 Starting {settings.app_name}...")
        yield
        # Shutdown
        logger.info(f"👋 Shutting down {settings.app_name}...")

    # Single endpoint: no docs, OpenAPI or health routes
    app = FastAPI(
        title=settings.app_name,
        description="Trimmed Spotify artist statistics",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings

    app.add_exception_handler(GatewayException, gateway_exception_handler)

    app.include_router(
        artist.router,
        prefix=settings.route_prefix,
        tags=["Artist"]
    )

    return app
