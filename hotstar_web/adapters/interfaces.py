"""Typed interfaces for adapter-layer responsibilities."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

import httpx

from hotstar_web.domain import OutboundRequestConfig


class CatalogClientPort(Protocol):
    """Port definition for issuing requests to the third-party catalog API."""

    def adapter_config(self) -> OutboundRequestConfig:
        """Return the immutable configuration shared by every call.

        Returns:
            OutboundRequestConfig: Base URL, timeout and default headers.
        """

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
            httpx.TransportError: Raised when no response arrived.
            Exception: Any request construction failure, re-raised unchanged.
        """

    def adapter_get_json(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """Issue one GET request and return the decoded JSON body.

        Args:
            path: Path relative to the configured base URL.
            params: Optional query string parameters.

        Returns:
            Any: Decoded JSON document.
        """
