# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""HTTP host configuration using pydantic-settings."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from pydantic import AliasChoices, Field
from pydantic_settings import SettingsConfigDict

from paperless_mcp.core.config import CoreSettings

logger = logging.getLogger(__name__)


def get_package_version() -> str:
    """Get the package version from installed metadata.

    Falls back to a dev marker when running from a source checkout.
    """
    try:
        return version("paperless-mcp")
    except PackageNotFoundError:
        return "0.0.0-dev"


class ServerSettings(CoreSettings):
    """Configuration for the SSE HTTP host.

    Inherits the collaborator and logging settings and adds the HTTP ones.
    Settings use the PAPERLESS_MCP_ prefix, except the API key which also
    accepts Paperless-AI's plain API_KEY variable.
    """

    model_config = SettingsConfigDict(
        env_prefix="PAPERLESS_MCP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="127.0.0.1", description="Host to bind to")
    port: int = Field(default=3000, description="Port to bind to")

    api_key: str = Field(
        default="",
        description="Bearer token MCP clients must present",
        validation_alias=AliasChoices("PAPERLESS_MCP_API_KEY", "API_KEY"),
    )

    allowed_origins: list[str] = Field(
        default=[],
        description="Allowed CORS origins. Empty = same-origin only.",
    )

    server_name: str = Field(default="paperless-ai", description="MCP server name")
    server_version: str = Field(default_factory=get_package_version, description="Server version")

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def sse_url(self) -> str:
        """URL clients connect to for the MCP event stream."""
        return f"{self.base_url}/mcp/sse"


# Global settings instance - lazy loaded
_settings: ServerSettings | None = None


def get_settings() -> ServerSettings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = ServerSettings()
    return _settings


def clear_settings_cache() -> None:
    """Clear the settings cache. Useful for testing."""
    global _settings
    _settings = None
