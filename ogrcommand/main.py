"""FastAPI application entrypoint and configuration.

This module provides the FastAPI application factory that sets up CORS
middleware, includes the command API router, and exposes a health check
endpoint for monitoring.

Example:
    The application can be run with any ASGI server:
        $ uvicorn ogrcommand.main:app

    Or imported and used programmatically:
        >>> from ogrcommand.main import create_app
        >>> app = create_app()
"""

import logging

import fastapi
from fastapi.middleware import cors

from ogrcommand.api import commands
from ogrcommand.core import config

logger = logging.getLogger(__name__)


def create_app() -> fastapi.FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance ready for ASGI server.
    """
    settings = config.get_settings()
    app = fastapi.FastAPI(title="OGR Command", version="0.1.0")

    app.include_router(commands.router)

    app.add_middleware(
        cors.CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict[str, str]:  # type: ignore[misc]
        """Health check endpoint for monitoring and load balancers."""
        return {"status": "ok"}

    if settings.allow_execution:
        logger.info("Command execution over HTTP is enabled")

    return app


app = create_app()
