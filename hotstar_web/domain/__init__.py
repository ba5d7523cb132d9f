"""Domain models and process introspection used across application layers."""

from .models import (
    DEFAULT_CATALOG_BASE_URL,
    DEFAULT_CATALOG_HEADERS,
    DEFAULT_CATALOG_TIMEOUT_SECONDS,
    HealthSnapshot,
    MetricsSnapshot,
    OutboundRequestConfig,
)
from .process_stats import (
    ProcessStatsPort,
    ProcessStatsProvider,
    runtime_build_health_snapshot,
    runtime_build_metrics_snapshot,
)

__all__ = [
    "DEFAULT_CATALOG_BASE_URL",
    "DEFAULT_CATALOG_HEADERS",
    "DEFAULT_CATALOG_TIMEOUT_SECONDS",
    "HealthSnapshot",
    "MetricsSnapshot",
    "OutboundRequestConfig",
    "ProcessStatsPort",
    "ProcessStatsProvider",
    "runtime_build_health_snapshot",
    "runtime_build_metrics_snapshot",
]
