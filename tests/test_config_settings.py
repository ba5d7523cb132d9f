"""Tests for runtime settings defaults, environment overrides and validation."""

from __future__ import annotations

import pytest

from pydantic import ValidationError

from hotstar_web.config import AppSettings, SettingsLoadError, config_load_settings

_SETTINGS_ENVIRONMENT_VARIABLES = (
    "ENVIRONMENT_NAME",
    "APP_VERSION",
    "APPLICATION_HOST",
    "PORT",
    "CATALOG_BASE_URL",
    "STATIC_ROOT",
    "ENTRY_DOCUMENT",
    "STATIC_CACHE_MAX_AGE_SECONDS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_settings_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate settings from the host environment and any local dotenv file."""

    for variable_name in _SETTINGS_ENVIRONMENT_VARIABLES:
        monkeypatch.delenv(variable_name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_settings_defaults() -> None:
    """Expose production defaults when nothing is configured.

    Returns:
        None: Assertions validate default values.

    Raises:
        AssertionError: Raised when a default drifts.
    """

    settings = config_load_settings()

    assert settings.environment_name == "production"
    assert settings.app_version == "1.0.0"
    assert settings.application_host == "0.0.0.0"
    assert settings.port == 3000
    assert settings.catalog_base_url == "https://api.themoviedb.org/3"
    assert settings.static_root == "build"
    assert settings.entry_document == "index.html"
    assert settings.static_cache_max_age_seconds == 31536000
    assert settings.log_level == "INFO"


def test_config_settings_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read port, environment, version and catalog base URL from the environment."""

    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("ENVIRONMENT_NAME", "staging")
    monkeypatch.setenv("APP_VERSION", "2.0.0")
    monkeypatch.setenv("CATALOG_BASE_URL", "https://catalog.example.test/3/")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config_load_settings()

    assert settings.port == 8080
    assert settings.environment_name == "staging"
    assert settings.app_version == "2.0.0"
    assert settings.catalog_base_url == "https://catalog.example.test/3"
    assert settings.log_level == "DEBUG"


def test_config_settings_read_dotenv_file(tmp_path) -> None:
    """Load values from a `.env` file in the working directory."""

    (tmp_path / ".env").write_text("PORT=4000\nAPP_VERSION=3.1.4\n", encoding="utf-8")

    settings = config_load_settings()

    assert settings.port == 4000
    assert settings.app_version == "3.1.4"


@pytest.mark.parametrize(
    ("variable_name", "value"),
    [
        ("PORT", "0"),
        ("PORT", "70000"),
        ("PORT", "not-a-port"),
        ("CATALOG_BASE_URL", "ftp://api.themoviedb.org/3"),
        ("ENVIRONMENT_NAME", "   "),
        ("LOG_LEVEL", "LOUD"),
        ("STATIC_CACHE_MAX_AGE_SECONDS", "-1"),
    ],
)
def test_config_settings_invalid_values_raise_load_error(
    monkeypatch: pytest.MonkeyPatch,
    variable_name: str,
    value: str,
) -> None:
    """Wrap validation failures in SettingsLoadError.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        variable_name: Environment variable to corrupt.
        value: Invalid value.

    Returns:
        None: Assertions validate error mapping.

    Raises:
        AssertionError: Raised when invalid configuration is accepted.
    """

    monkeypatch.setenv(variable_name, value)

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_settings_are_read_only_after_load() -> None:
    """Keep settings values stable for the process lifetime."""

    settings = AppSettings(_env_file=None)

    with pytest.raises(ValidationError):
        settings.port = 9999
