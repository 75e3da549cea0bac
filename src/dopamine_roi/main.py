"""Dopamine ROI assessment service entry point.

Run with ``uvicorn dopamine_roi.main:app``.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from dopamine_roi import __version__
from dopamine_roi.api.errors import register_exception_handlers
from dopamine_roi.api.router import router
from dopamine_roi.database import init_database
from dopamine_roi.observability import configure_logging, get_logger
from dopamine_roi.settings import Settings, get_settings

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Service settings. Defaults to the environment-loaded settings.

    Returns:
        Configured FastAPI application.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Manage application startup and shutdown lifecycle.

        Args:
            app: The FastAPI application instance.

        Yields:
            None
        """
        # Startup
        configure_logging(settings.log_level, json_logs=settings.json_logs)
        app.state.database = init_database(settings)
        app.state.http_client = httpx.AsyncClient(timeout=settings.outbound_timeout_seconds)
        logger.info(
            "Service started",
            service=settings.service_name,
            environment=settings.environment,
            persistence=settings.persistence_enabled,
        )
        yield
        # Shutdown
        await app.state.http_client.aclose()
        if app.state.database is not None:
            await app.state.database.dispose()
        logger.info("Service stopped", service=settings.service_name)

    app = FastAPI(
        title="Dopamine ROI Assessment",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    register_exception_handlers(app)
    app.include_router(router, prefix="/api")

    @app.get("/health", tags=["Health"])
    async def health() -> dict[str, str]:
        """Liveness probe."""
        return {"status": "ok"}

    return app


app: FastAPI = create_app()
