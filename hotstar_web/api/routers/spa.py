"""Static bundle router with single-page-application fallback routing.

Every GET that did not match an earlier route lands here. A path naming a
file inside the static root is served with long-lived cache headers; any
other path, including unknown, malformed or traversal paths, is answered with
the entry document and HTTP 200 so client-side routing can take over.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import FileResponse
from starlette.responses import Response
from starlette.staticfiles import StaticFiles

from hotstar_web.config import AppSettings

logger = logging.getLogger(__name__)


class EntryDocumentMissingError(RuntimeError):
    """Raised when the SPA entry document is absent from the static root."""


def api_create_spa_router(settings: AppSettings) -> APIRouter:
    """Create the last-resort router serving static assets and the entry document.

    Args:
        settings: Runtime settings providing static root, entry document and cache age.

    Returns:
        APIRouter: Router exposing a catch-all GET route. It must be included
        after every other router.

    Raises:
        ValueError: Raised when settings is invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    static_root = Path(settings.static_root).resolve()
    entry_document_path = static_root / settings.entry_document
    asset_cache_control = f"public, max-age={settings.static_cache_max_age_seconds}"
    static_files = StaticFiles(directory=static_root, check_dir=False)

    router = APIRouter(tags=["spa"])

    @router.api_route("/{resource_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
    def api_spa_resource(resource_path: str, request: Request) -> Response:
        """Serve a matching static asset, else the entry document.

        Args:
            resource_path: Request path without the leading slash.
            request: Incoming request, used for conditional headers.

        Returns:
            Response: Asset response (200 or 304) or entry document (200).

        Raises:
            EntryDocumentMissingError: Raised when the entry document is absent.
        """

        asset_path, asset_stat = _api_lookup_asset(static_files=static_files, resource_path=resource_path)
        if asset_stat is not None:
            response = static_files.file_response(asset_path, asset_stat, request.scope)
            response.headers["Cache-Control"] = asset_cache_control
            return response

        if not entry_document_path.is_file():
            raise EntryDocumentMissingError(f"entry document not found: {entry_document_path}")
        return FileResponse(
            entry_document_path,
            media_type="text/html",
            headers={"Cache-Control": "public, max-age=0"},
        )

    return router


def _api_lookup_asset(static_files: StaticFiles, resource_path: str) -> tuple[str, os.stat_result | None]:
    """Resolve a request path to a regular file inside the static root.

    Args:
        static_files: Static file resolver bound to the static root.
        resource_path: Request path without the leading slash.

    Returns:
        tuple[str, os.stat_result | None]: File path and stat result, or an
        empty path and None when nothing servable matches.
    """

    # A trailing slash names a directory, never a file.
    if resource_path.endswith("/"):
        return "", None
    normalized_path = os.path.normpath(os.path.join(*resource_path.split("/")))
    try:
        full_path, stat_result = static_files.lookup_path(normalized_path)
    except (OSError, ValueError) as error:
        logger.debug("Static lookup failed for %s: %s", resource_path, error)
        return "", None
    if stat_result is None or not stat.S_ISREG(stat_result.st_mode):
        return "", None
    return full_path, stat_result
