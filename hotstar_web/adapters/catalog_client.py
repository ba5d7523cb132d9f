"""HTTP client for the third-party movie catalog API (TMDB)."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from hotstar_web.domain import DEFAULT_CATALOG_BASE_URL, DEFAULT_CATALOG_TIMEOUT_SECONDS, OutboundRequestConfig

from .catalog_errors import CatalogFailureKind, adapter_classify_failure
from .interfaces import CatalogClientPort

logger = logging.getLogger(__name__)


class CatalogHttpClient(CatalogClientPort):
    """Configured calling surface for every catalog-data request.

    The client attaches the default headers, base URL and fixed timeout to each
    call, classifies failures for logging and always re-raises the original
    error. It never retries and never caches.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout_seconds: float = DEFAULT_CATALOG_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize catalog client with one pooled HTTP client.

        Args:
            base_url: Catalog API base URL; the public endpoint is used when unset.
            timeout_seconds: Request timeout in seconds.
            transport: Optional transport override, mainly for tests.

        Raises:
            ValueError: Raised when base URL is blank or timeout is not positive.
        """

        self._config = OutboundRequestConfig(
            base_url=base_url or DEFAULT_CATALOG_BASE_URL,
            timeout_seconds=timeout_seconds,
        )
        self._client = httpx.Client(
            base_url=self._config.base_url,
            timeout=httpx.Timeout(self._config.timeout_seconds),
            headers=dict(self._config.default_headers),
            transport=transport,
        )

    def __enter__(self) -> CatalogHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.adapter_close()

    def adapter_config(self) -> OutboundRequestConfig:
        """Return the immutable configuration shared by every call.

        Returns:
            OutboundRequestConfig: Base URL, timeout and default headers.
        """

        return self._config

    def adapter_default_headers(self) -> dict[str, str]:
        """Return a copy of the headers attached to every request."""

        return dict(self._config.default_headers)

    def adapter_request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
    ) -> httpx.Response:
        """Issue one request and return the successful response unchanged.

        Args:
            method: HTTP method.
            path: Path relative to the configured base URL.
            params: Optional query string parameters.
            json_body: Optional JSON-serializable request body.

        Returns:
            httpx.Response: Response with a 2xx status code.

        Raises:
            httpx.HTTPStatusError: Raised when the remote answered non-2xx.
            httpx.TransportError: Raised when the request was sent but no response arrived.
            Exception: Any request construction failure, re-raised unchanged.
        """

        try:
            request = self._client.build_request(
                method,
                path,
                params=dict(params) if params is not None else None,
                json=json_body,
            )
        except Exception as error:
            self._adapter_log_failure(error=error, request=None)
            raise

        try:
            response = self._client.send(request)
            response.raise_for_status()
        except Exception as error:
            self._adapter_log_failure(error=error, request=request)
            raise
        return response

    def adapter_get_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """Issue one GET request and return the decoded JSON body.

        Args:
            path: Path relative to the configured base URL.
            params: Optional query string parameters.

        Returns:
            Any: Decoded JSON document.

        Raises:
            httpx.HTTPError: Raised for classified transport and status failures.
            ValueError: Raised when the response body is not valid JSON.
        """

        response = self.adapter_request("GET", path, params=params)
        return response.json()

    def adapter_close(self) -> None:
        """Close pooled connections held by the underlying HTTP client."""

        self._client.close()

    def _adapter_log_failure(self, error: Exception, request: httpx.Request | None) -> CatalogFailureKind:
        failure_kind = adapter_classify_failure(error)
        if failure_kind is CatalogFailureKind.BAD_STATUS:
            response = error.response  # type: ignore[attr-defined]
            logger.error("Catalog API error: %s %s", response.status_code, response.text)
        elif failure_kind is CatalogFailureKind.NO_RESPONSE and request is not None:
            logger.error("Catalog network error: %s %s (%s)", request.method, request.url, type(error).__name__)
        else:
            logger.error("Catalog request error: %s", error)
        return failure_kind
