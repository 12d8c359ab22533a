"""Core configuration - centralized config for the paperless_mcp package.

All environment-based configuration should flow through this module.
This provides a single source of truth and consistent defaults.

Usage:
    from paperless_mcp.core.config import get_config
    config = get_config()

    if config.rag_service_enabled:
        ...
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CoreSettings(BaseSettings):
    """Core configuration settings for the MCP bridge.

    Collaborator settings keep the variable names Paperless-AI already uses
    (PAPERLESS_API_URL, RAG_SERVICE_URL, ...). Bridge-specific settings use
    the PAPERLESS_MCP_ prefix.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ==========================================================================
    # PAPERLESS REPOSITORY SETTINGS
    # ==========================================================================

    paperless_api_url: str = Field(
        default="http://localhost:8000/api",
        description="Base URL of the Paperless-ngx REST API",
        validation_alias="PAPERLESS_API_URL",
    )
    paperless_api_token: str = Field(
        default="",
        description="Paperless-ngx API token",
        validation_alias="PAPERLESS_API_TOKEN",
    )

    # ==========================================================================
    # RAG SEARCH SETTINGS
    # ==========================================================================

    rag_service_url: str = Field(
        default="http://localhost:8000",
        description="Base URL of the semantic RAG search service",
        validation_alias="RAG_SERVICE_URL",
    )
    rag_service_enabled: bool = Field(
        default=False,
        description="Whether semantic search is available to MCP clients",
        validation_alias="RAG_SERVICE_ENABLED",
    )

    request_timeout: float = Field(
        default=30.0,
        description="Total timeout in seconds for a single collaborator request",
        validation_alias="PAPERLESS_MCP_REQUEST_TIMEOUT",
    )

    # ==========================================================================
    # LOGGING SETTINGS
    # ==========================================================================

    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="PAPERLESS_MCP_LOG_LEVEL",
    )
    log_format: str = Field(
        default="",
        description="Log format: 'json', 'text', or '' (auto-detect)",
        validation_alias="PAPERLESS_MCP_LOG_FORMAT",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (optional)",
        validation_alias="PAPERLESS_MCP_LOG_FILE",
    )

    @field_validator("paperless_api_url")
    @classmethod
    def normalize_api_url(cls, value: str) -> str:
        """Strip trailing slashes and make sure the URL points at /api."""
        value = value.rstrip("/")
        if not value.endswith("/api"):
            value = f"{value}/api"
        return value

    @field_validator("rag_service_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


# ==========================================================================
# GLOBAL CONFIG INSTANCE (lazy loaded)
# ==========================================================================

_config: CoreSettings | None = None


def get_config() -> CoreSettings:
    """Get the global configuration instance.

    Returns:
        The singleton CoreSettings instance.
    """
    global _config
    if _config is None:
        _config = CoreSettings()
    return _config


def clear_config_cache() -> None:
    """Clear the config cache. Useful for testing."""
    global _config
    _config = None
