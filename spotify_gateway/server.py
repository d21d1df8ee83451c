"""
HTTP server lifecycle for the gateway.

On SIGINT/SIGTERM the server keeps serving for a grace period, then stops
accepting connections and gives in-flight requests a bounded deadline
(uvicorn's timeout_graceful_shutdown) before cancelling them.
"""
import asyncio
import logging
import sys
from types import FrameType
from typing import Optional

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from spotify_gateway.config import Settings, get_settings
from spotify_gateway.core.logging import configure_logging
from spotify_gateway.main import create_app

logger = logging.getLogger(__name__)


class GatewayServer(uvicorn.Server):
    """uvicorn server that delays shutdown by a fixed grace period."""

    def __init__(self, config: uvicorn.Config, grace_period: float):
        super().__init__(config)
        self.grace_period = grace_period
        self.shutdown_requested = False

    def handle_exit(self, sig: int, frame: Optional[FrameType]) -> None:
        # Only the first signal counts; there is no forced exit path
        if self.shutdown_requested:
            return
        self.shutdown_requested = True

        logger.info("service interrupt received")
        logger.info("http server shutting down")
        # Runs inside a signal handler; hand the timer to the loop instead of
        # touching its schedule directly
        loop = asyncio.get_running_loop()
        loop.call_soon_threadsafe(loop.call_later, self.grace_period, self._begin_shutdown)

    def _begin_shutdown(self) -> None:
        logger.info(
            f"Grace period over, draining connections "
            f"(deadline {self.config.timeout_graceful_shutdown}s)"
        )
        self.should_exit = True


def build_server(app: FastAPI, settings: Settings) -> GatewayServer:
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_timeout_seconds,
    )
    return GatewayServer(config, grace_period=settings.shutdown_grace_seconds)


def load_settings() -> Settings:
    """Load settings or terminate the process before anything is bound."""
    try:
        return get_settings()
    except ValidationError as e:
        if any(error["loc"] == ("spotify_api_token",) for error in e.errors()):
            logger.critical("Spotify API token not provided")
        else:
            logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)


def run() -> None:
    """Process entry point: serve until signaled, then exit cleanly."""
    configure_logging()
    settings = load_settings()
    configure_logging(settings.log_level)

    server = build_server(create_app(settings), settings)

    logger.info(f"Starting server on port {settings.port}")
    server.run()

    logger.info("shutdown complete")
    logger.info("Service Stop")
