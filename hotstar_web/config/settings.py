"""Typed runtime settings with dotenv support and startup validation."""

import logging

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the production server and catalog client.

    Environment variable names map directly to field names in uppercase.
    Example: `app_version` reads from `APP_VERSION`.

    Attributes:
        environment_name: Deployment environment label reported by `/health`.
        app_version: Application version label reported by `/health`.
        application_host: Host interface for web server binding.
        port: Web server port.
        catalog_base_url: Base URL of the third-party catalog API.
        static_root: Directory holding the prebuilt front-end bundle.
        entry_document: File name of the SPA entry document inside `static_root`.
        static_cache_max_age_seconds: `max-age` applied to matched static assets.
        log_level: Root logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    environment_name: str = Field(default="production")
    app_version: str = Field(default="1.0.0")
    application_host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)
    catalog_base_url: str = Field(default="https://api.themoviedb.org/3")
    static_root: str = Field(default="build")
    entry_document: str = Field(default="index.html")
    static_cache_max_age_seconds: int = Field(default=31536000, ge=0)
    log_level: str = Field(default="INFO")

    @field_validator(
        "environment_name",
        "app_version",
        "application_host",
        "catalog_base_url",
        "static_root",
        "entry_document",
    )
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("catalog_base_url")
    @classmethod
    def _validate_catalog_scheme(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("catalog_base_url must start with http:// or https://")
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_level = value.strip().upper()
        if normalized_level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return normalized_level


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
