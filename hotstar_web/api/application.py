"""FastAPI application factory for the production web server.

This module composes the health and metrics routers, the SPA fallback router and the
middleware stack used to host the front-end bundle.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.gzip import GZipMiddleware

from hotstar_web.config import AppSettings
from hotstar_web.domain import ProcessStatsPort, ProcessStatsProvider

from .middleware import (
    ErrorFallbackMiddleware,
    HeadResponseMiddleware,
    SecurityHeadersMiddleware,
    api_build_security_headers,
    api_catalog_origin,
)
from .routers import api_create_health_router, api_create_metrics_router, api_create_spa_router

logger = logging.getLogger(__name__)

_GZIP_MINIMUM_SIZE_BYTES = 1024


def create_api_application(
    settings: AppSettings,
    process_stats: ProcessStatsPort | None = None,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings.
        process_stats: Optional process statistics accessor; a fresh
            `ProcessStatsProvider` is created when omitted.

    Returns:
        FastAPI: Application with health, metrics, SPA routing and middleware installed.

    Raises:
        ValueError: Raised when settings is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    resolved_process_stats = process_stats or ProcessStatsProvider()

    @asynccontextmanager
    async def api_lifespan(_application: FastAPI) -> AsyncIterator[None]:
        logger.info("Server running on port %s in %s mode", settings.port, settings.environment_name)
        yield
        logger.info("Shutdown signal received, stopping server")

    application = FastAPI(
        title="Hotstar Web",
        version=settings.app_version,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=api_lifespan,
    )

    application.include_router(api_create_health_router(settings=settings, process_stats=resolved_process_stats))
    application.include_router(api_create_metrics_router(process_stats=resolved_process_stats))
    # Catch-all route; must stay last.
    application.include_router(api_create_spa_router(settings=settings))

    # Last added middleware runs first; HEAD body stripping sits outside gzip.
    application.add_middleware(ErrorFallbackMiddleware)
    application.add_middleware(
        SecurityHeadersMiddleware,
        security_headers=api_build_security_headers(api_catalog_origin(settings.catalog_base_url)),
    )
    application.add_middleware(GZipMiddleware, minimum_size=_GZIP_MINIMUM_SIZE_BYTES)
    application.add_middleware(HeadResponseMiddleware)

    return application
