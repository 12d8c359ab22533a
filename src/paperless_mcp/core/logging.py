# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""Structured logging configuration for the MCP bridge.

Provides:
- JSON formatter for production (machine-parseable)
- Standard formatter for development (human-readable)
- Correlation IDs so every log line of one tool call can be grouped
- Sanitized tool call logging

Logs always go to stderr: the stdio transport owns stdout.
"""

from __future__ import annotations

import json
import logging
import sys
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context, if any."""
    return _correlation_id.get()


@contextmanager
def correlation_context(
    correlation_id: str | None = None,
) -> Generator[str, None, None]:
    """Scope a correlation ID to the enclosed block.

    Args:
        correlation_id: ID to use. A new UUID is generated when omitted.

    Yields:
        The correlation ID in effect.
    """
    cid = correlation_id or str(uuid.uuid4())
    token = _correlation_id.set(cid)
    try:
        yield cid
    finally:
        _correlation_id.reset(token)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for production environments."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        correlation_id = get_correlation_id()
        if correlation_id:
            log_data["correlation_id"] = correlation_id

        if record.levelno >= logging.WARNING:
            log_data["source"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra_data"):
            log_data["extra"] = record.extra_data

        return json.dumps(log_data, default=str)


class StandardFormatter(logging.Formatter):
    """Human-readable formatter with optional colors for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"
    CORRELATION_COLOR = "\033[90m"

    def __init__(self, use_colors: bool = True):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        self.use_colors = use_colors and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        # Copy so other handlers see the untouched record
        record = logging.makeLogRecord(record.__dict__)

        correlation_id = get_correlation_id()
        if correlation_id:
            short_cid = correlation_id[:8]
            if self.use_colors:
                cid_str = f"{self.CORRELATION_COLOR}[{short_cid}]{self.RESET} "
            else:
                cid_str = f"[{short_cid}] "
            record.msg = cid_str + str(record.msg)

        if self.use_colors:
            color = self.COLORS.get(record.levelname, "")
            record.levelname = f"{color}{record.levelname}{self.RESET}"

        return super().format(record)


def configure_logging(
    level: str | int | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Configure root logging for the bridge.

    Args:
        level: Log level; falls back to PAPERLESS_MCP_LOG_LEVEL.
        json_format: Use JSON format; auto-detected from PAPERLESS_MCP_LOG_FORMAT
            or the terminal when None.
        log_file: Optional file to write JSON logs to.
    """
    from .config import get_config

    config = get_config()

    if level is None:
        level = config.log_level
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if json_format is None:
        format_env = config.log_format.lower()
        if format_env == "json":
            json_format = True
        elif format_env == "text":
            json_format = False
        else:
            json_format = not sys.stderr.isatty()

    log_file = config.log_file if log_file is None else log_file

    formatter: logging.Formatter = JSONFormatter() if json_format else StandardFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


class ToolCallLogger:
    """Logger for MCP tool calls.

    Arguments are sanitized before logging so tokens never end up in logs
    and long query strings do not flood them.
    """

    SENSITIVE_PARAMS = {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "auth",
        "credential",
    }
    MAX_STRING_LENGTH = 500

    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("paperless_mcp.tools")

    def log_call(
        self,
        tool_name: str,
        arguments: dict[str, Any],
        level: int = logging.DEBUG,
    ) -> None:
        """Log a tool call with sanitized arguments."""
        self.logger.log(
            level,
            f"Tool call: {tool_name}",
            extra={
                "extra_data": {
                    "tool": tool_name,
                    "arguments": self._sanitize(arguments),
                }
            },
        )

    def log_result(
        self,
        tool_name: str,
        success: bool,
        duration_ms: float | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        """Log the outcome of a tool call."""
        status = "success" if success else "failure"
        msg = f"Tool result: {tool_name} -> {status}"
        if duration_ms is not None:
            msg += f" ({duration_ms:.1f}ms)"

        self.logger.log(
            level,
            msg,
            extra={
                "extra_data": {
                    "tool": tool_name,
                    "success": success,
                    "duration_ms": duration_ms,
                }
            },
        )

    def _sanitize(self, data: Any) -> Any:
        if isinstance(data, dict):
            result = {}
            for key, value in data.items():
                if any(s in key.lower() for s in self.SENSITIVE_PARAMS):
                    result[key] = "[REDACTED]"
                else:
                    result[key] = self._sanitize(value)
            return result
        elif isinstance(data, list):
            return [self._sanitize(item) for item in data]
        elif isinstance(data, str) and len(data) > self.MAX_STRING_LENGTH:
            return data[: self.MAX_STRING_LENGTH] + "..."
        else:
            return data


tool_logger = ToolCallLogger()
