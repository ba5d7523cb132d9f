"""Typed domain models shared across runtime layers.

This module provides immutable data contracts for outbound catalog calls and
the health and metrics payloads. None of them outlive a single request except
the request configuration, which is fixed per client.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_CATALOG_BASE_URL = "https://api.themoviedb.org/3"
DEFAULT_CATALOG_TIMEOUT_SECONDS = 10.0
DEFAULT_CATALOG_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
)


@dataclass(frozen=True)
class OutboundRequestConfig:
    """Configuration shared by every call issued through one catalog client.

    Attributes:
        base_url: Catalog API base URL without trailing slash.
        timeout_seconds: Timeout applied to connect, read, write and pool phases.
        default_headers: Headers attached to every outbound request.
    """

    base_url: str = DEFAULT_CATALOG_BASE_URL
    timeout_seconds: float = DEFAULT_CATALOG_TIMEOUT_SECONDS
    default_headers: Mapping[str, str] = field(default_factory=lambda: DEFAULT_CATALOG_HEADERS)

    def __post_init__(self) -> None:
        normalized_base_url = self.base_url.strip().rstrip("/")
        if not normalized_base_url:
            raise ValueError("base_url must not be blank")
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        object.__setattr__(self, "base_url", normalized_base_url)
        object.__setattr__(self, "default_headers", MappingProxyType(dict(self.default_headers)))


@dataclass(frozen=True)
class HealthSnapshot:
    """Liveness payload computed for every `/health` request.

    Attributes:
        status: Fixed liveness label.
        timestamp: ISO-8601 UTC timestamp of the snapshot.
        uptime: Process uptime in seconds.
        environment: Deployment environment label.
        version: Application version label.
    """

    status: str
    timestamp: str
    uptime: float
    environment: str
    version: str

    def to_payload(self) -> dict[str, object]:
        """Return JSON-serializable response body."""

        return asdict(self)


@dataclass(frozen=True)
class MetricsSnapshot:
    """Instantaneous process metrics computed for every `/metrics` request.

    Attributes:
        memory: Memory figures in bytes (`rss`, `max_rss`).
        uptime: Process uptime in seconds.
        cpu: CPU time figures in microseconds (`user`, `system`).
    """

    memory: dict[str, int]
    uptime: float
    cpu: dict[str, int]

    def to_payload(self) -> dict[str, object]:
        """Return JSON-serializable response body."""

        return asdict(self)
