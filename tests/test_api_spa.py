"""Tests for static asset serving and single-page-application fallback routing.

Returning 200 with the entry document for paths that do not exist is the
intended hosting contract for client-side routing, not a missing 404.
"""

from __future__ import annotations

from pathlib import Path

from fastapi.testclient import TestClient

from hotstar_web.api.application import create_api_application
from hotstar_web.config import AppSettings

_ENTRY_DOCUMENT = "<!doctype html><html><body><div id=\"root\"></div></body></html>"
_BUNDLE_SCRIPT = "console.log('hotstar');\n" * 200


def _build_static_root(tmp_path: Path) -> Path:
    """Create a minimal built front-end bundle.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        Path: Static root directory containing the entry document and assets.
    """

    static_root = tmp_path / "build"
    (static_root / "static" / "js").mkdir(parents=True)
    (static_root / "index.html").write_text(_ENTRY_DOCUMENT, encoding="utf-8")
    (static_root / "static" / "js" / "main.js").write_text(_BUNDLE_SCRIPT, encoding="utf-8")
    (static_root / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")
    (tmp_path / "outside.txt").write_text("secret", encoding="utf-8")
    return static_root


def _build_client(tmp_path: Path) -> TestClient:
    settings = AppSettings(_env_file=None, static_root=str(_build_static_root(tmp_path)))
    return TestClient(create_api_application(settings))


def test_api_spa_unknown_path_returns_entry_document(tmp_path: Path) -> None:
    """Answer an arbitrary unmatched path with 200 and the entry document.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        None: Assertions validate fallback routing.

    Raises:
        AssertionError: Raised when fallback does not serve the entry document.
    """

    client = _build_client(tmp_path)

    response = client.get("/this/does/not/exist")

    assert response.status_code == 200
    assert response.text == _ENTRY_DOCUMENT
    assert response.headers["content-type"].startswith("text/html")
    assert response.headers["cache-control"] == "public, max-age=0"


def test_api_spa_root_and_client_routes_return_entry_document(tmp_path: Path) -> None:
    """Serve the entry document for the root and client-side routes."""

    client = _build_client(tmp_path)

    for path in ("/", "/movie/550", "/tv/1399/season/1", "/static", "/static/js/missing.js"):
        response = client.get(path)
        assert response.status_code == 200, path
        assert response.text == _ENTRY_DOCUMENT, path


def test_api_spa_serves_asset_with_long_lived_cache_headers(tmp_path: Path) -> None:
    """Serve a matching asset with one-year cache, ETag and Last-Modified headers."""

    client = _build_client(tmp_path)

    response = client.get("/static/js/main.js")

    assert response.status_code == 200
    assert response.text == _BUNDLE_SCRIPT
    assert response.headers["cache-control"] == "public, max-age=31536000"
    assert response.headers["etag"]
    assert response.headers["last-modified"]


def test_api_spa_conditional_request_returns_not_modified(tmp_path: Path) -> None:
    """Answer a revalidation with a matching ETag with 304 and no body.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        None: Assertions validate conditional-request support.

    Raises:
        AssertionError: Raised when the asset is re-sent.
    """

    client = _build_client(tmp_path)
    etag = client.get("/favicon.ico").headers["etag"]

    response = client.get("/favicon.ico", headers={"If-None-Match": etag})

    assert response.status_code == 304
    assert response.content == b""


def test_api_spa_traversal_attempt_falls_back_to_entry_document(tmp_path: Path) -> None:
    """Never serve files outside the static root; fall back to the entry document."""

    client = _build_client(tmp_path)

    response = client.get("/static/%2e%2e/%2e%2e/outside.txt")

    assert response.status_code == 200
    assert response.text == _ENTRY_DOCUMENT
    assert "secret" not in response.text


def test_api_spa_compresses_large_responses(tmp_path: Path) -> None:
    """Gzip eligible responses when the client accepts gzip."""

    client = _build_client(tmp_path)

    response = client.get("/static/js/main.js", headers={"Accept-Encoding": "gzip"})

    assert response.status_code == 200
    assert response.headers["content-encoding"] == "gzip"
    assert response.text == _BUNDLE_SCRIPT


def test_api_spa_small_responses_are_not_compressed(tmp_path: Path) -> None:
    """Skip compression below the minimum size threshold."""

    client = _build_client(tmp_path)

    response = client.get("/health", headers={"Accept-Encoding": "gzip"})

    assert response.status_code == 200
    assert "content-encoding" not in response.headers


def test_api_spa_missing_entry_document_returns_server_error(tmp_path: Path) -> None:
    """Answer 500 JSON when the entry document is absent and keep serving.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        None: Assertions validate error fallback behavior.

    Raises:
        AssertionError: Raised when the failure leaks or the server stops responding.
    """

    static_root = tmp_path / "empty-build"
    static_root.mkdir()
    settings = AppSettings(_env_file=None, static_root=str(static_root))
    client = TestClient(create_api_application(settings))

    response = client.get("/anything")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
    assert client.get("/health").status_code == 200


def test_api_head_requests_return_headers_without_body(tmp_path: Path) -> None:
    """Answer HEAD on assets, client routes and health with 200 and an empty body.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        None: Assertions validate HEAD support.

    Raises:
        AssertionError: Raised when HEAD is rejected or carries a body.
    """

    client = _build_client(tmp_path)

    for path in ("/static/js/main.js", "/movie/550", "/health", "/metrics"):
        response = client.head(path)
        assert response.status_code == 200, path
        assert response.content == b"", path
        assert response.headers["x-content-type-options"] == "nosniff", path

    asset_response = client.head("/static/js/main.js")
    assert asset_response.headers["cache-control"] == "public, max-age=31536000"
    assert asset_response.headers["content-length"] == str(len(_BUNDLE_SCRIPT.encode("utf-8")))


def test_api_spa_trailing_slash_on_asset_returns_entry_document(tmp_path: Path) -> None:
    """Treat a file path with a trailing slash as a client route, not the file."""

    client = _build_client(tmp_path)

    response = client.get("/static/js/main.js/")

    assert response.status_code == 200
    assert response.text == _ENTRY_DOCUMENT
    assert response.headers["cache-control"] == "public, max-age=0"
