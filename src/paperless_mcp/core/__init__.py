"""Core building blocks: configuration, errors, logging and the tool response envelope."""

from .config import CoreSettings, clear_config_cache, get_config
from .exceptions import (
    ConfigException,
    NotFoundError,
    PaperlessMCPException,
    ServiceException,
    UnknownToolError,
)
from .response import ToolResponse, err, ok

__all__ = [
    "ConfigException",
    "CoreSettings",
    "NotFoundError",
    "PaperlessMCPException",
    "ServiceException",
    "ToolResponse",
    "UnknownToolError",
    "clear_config_cache",
    "err",
    "get_config",
    "ok",
]
