"""Failure taxonomy for outbound catalog API calls."""

from __future__ import annotations

from enum import Enum

import httpx


class CatalogFailureKind(str, Enum):
    """Categories a failed catalog call is classified into before re-raising."""

    BAD_STATUS = "bad_status"
    NO_RESPONSE = "no_response"
    REQUEST_SETUP = "request_setup"


def adapter_classify_failure(error: BaseException) -> CatalogFailureKind:
    """Classify one outbound failure into its logging category.

    Args:
        error: Exception raised while building, sending or validating a request.

    Returns:
        CatalogFailureKind: `BAD_STATUS` when the remote answered non-2xx,
        `NO_RESPONSE` when the request left but no answer arrived, otherwise
        `REQUEST_SETUP`.
    """

    if isinstance(error, httpx.HTTPStatusError):
        return CatalogFailureKind.BAD_STATUS
    # Unsupported scheme is detected before any bytes are sent.
    if isinstance(error, httpx.UnsupportedProtocol):
        return CatalogFailureKind.REQUEST_SETUP
    if isinstance(error, httpx.TransportError):
        return CatalogFailureKind.NO_RESPONSE
    return CatalogFailureKind.REQUEST_SETUP
