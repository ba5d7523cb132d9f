"""Application bootstrap wiring for startup validation and dependency assembly."""

from fastapi import FastAPI

from hotstar_web.adapters import CatalogHttpClient
from hotstar_web.api import create_api_application
from hotstar_web.config import AppSettings, config_load_settings
from hotstar_web.domain import ProcessStatsProvider


def bootstrap_create_application(settings: AppSettings | None = None) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional pre-validated settings; loaded from the environment when omitted.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return create_api_application(
        settings=resolved_settings,
        process_stats=ProcessStatsProvider(),
    )


def bootstrap_create_catalog_client(settings: AppSettings | None = None) -> CatalogHttpClient:
    """Build the catalog API client for non-HTTP trigger surfaces.

    Args:
        settings: Optional pre-validated settings; loaded from the environment when omitted.

    Returns:
        CatalogHttpClient: Client bound to the configured catalog base URL.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
    """

    resolved_settings = settings or config_load_settings()
    return CatalogHttpClient(base_url=resolved_settings.catalog_base_url)
