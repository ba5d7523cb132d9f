"""HTTP middleware for security headers, HEAD handling and per-request error fallback."""

from __future__ import annotations

import logging
from typing import Mapping
from urllib.parse import urlsplit

from fastapi import status
from fastapi.responses import JSONResponse
from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

_STYLE_SOURCES = ("'self'", "'unsafe-inline'", "https://fonts.googleapis.com", "https://cdnjs.cloudflare.com")
_FONT_SOURCES = ("'self'", "https://fonts.gstatic.com", "https://cdnjs.cloudflare.com")
_IMAGE_SOURCES = ("'self'", "data:", "https:", "http:")


def api_catalog_origin(catalog_base_url: str) -> str:
    """Return the scheme and host part of the catalog API base URL.

    Args:
        catalog_base_url: Absolute catalog API base URL.

    Returns:
        str: Origin such as `https://api.themoviedb.org`.

    Raises:
        ValueError: Raised when the URL has no scheme or host.
    """

    parts = urlsplit(catalog_base_url)
    if not parts.scheme or not parts.netloc:
        raise ValueError(f"catalog_base_url is not absolute: {catalog_base_url}")
    return f"{parts.scheme}://{parts.netloc}"


def api_build_content_security_policy(catalog_origin: str) -> str:
    """Build the content-security-policy header value.

    Args:
        catalog_origin: Catalog API origin the browser is allowed to connect to.

    Returns:
        str: Serialized policy directives.
    """

    directives: list[tuple[str, tuple[str, ...]]] = [
        ("default-src", ("'self'",)),
        ("style-src", _STYLE_SOURCES),
        ("font-src", _FONT_SOURCES),
        ("script-src", ("'self'",)),
        ("img-src", _IMAGE_SOURCES),
        ("connect-src", ("'self'", catalog_origin)),
        ("base-uri", ("'self'",)),
        ("form-action", ("'self'",)),
        ("frame-ancestors", ("'self'",)),
        ("object-src", ("'none'",)),
        ("script-src-attr", ("'none'",)),
        ("upgrade-insecure-requests", ()),
    ]
    return "; ".join(" ".join((name, *sources)) for name, sources in directives)


def api_build_security_headers(catalog_origin: str) -> dict[str, str]:
    """Return the fixed security header set applied to every response.

    Args:
        catalog_origin: Catalog API origin allowed by `connect-src`.

    Returns:
        dict[str, str]: Header names mapped to values.
    """

    return {
        "Content-Security-Policy": api_build_content_security_policy(catalog_origin),
        "Cross-Origin-Opener-Policy": "same-origin",
        "Cross-Origin-Resource-Policy": "same-origin",
        "Origin-Agent-Cluster": "?1",
        "Referrer-Policy": "no-referrer",
        "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
        "X-Content-Type-Options": "nosniff",
        "X-DNS-Prefetch-Control": "off",
        "X-Download-Options": "noopen",
        "X-Frame-Options": "SAMEORIGIN",
        "X-Permitted-Cross-Domain-Policies": "none",
        "X-XSS-Protection": "0",
    }


class SecurityHeadersMiddleware:
    """Attach a fixed set of security headers to every HTTP response."""

    def __init__(self, app: ASGIApp, security_headers: Mapping[str, str]):
        self.app = app
        self._security_headers = dict(security_headers)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_security_headers(message: Message) -> None:
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                headers = MutableHeaders(scope=message)
                for header_name, header_value in self._security_headers.items():
                    headers[header_name] = header_value
            await send(message)

        await self.app(scope, receive, send_with_security_headers)


class ErrorFallbackMiddleware:
    """Answer any unhandled request failure with a generic 500 JSON body.

    The failure is logged with its traceback and the server keeps serving
    subsequent requests. A failure after the response has started cannot be
    replaced and is re-raised to the server.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_tracking_start(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_tracking_start)
        except Exception:
            logger.exception("Error while handling %s %s", scope.get("method"), scope.get("path"))
            if response_started:
                raise
            response = JSONResponse(
                content={"error": "Internal Server Error"},
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
            await response(scope, receive, send)


class HeadResponseMiddleware:
    """Answer HEAD requests with the GET headers and an empty body."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "HEAD":
            await self.app(scope, receive, send)
            return

        async def send_without_body(message: Message) -> None:
            if message["type"] == "http.response.body":
                message = {**message, "body": b""}
            await send(message)

        await self.app(scope, receive, send_without_body)
