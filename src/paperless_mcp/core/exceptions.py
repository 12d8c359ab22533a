# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""Custom exception hierarchy for the MCP bridge.

Domain failures (collaborator errors, missing documents) are caught by the
tool handlers and turned into error envelopes. ``UnknownToolError`` is the
only exception allowed to escape the dispatcher.
"""

from __future__ import annotations


class PaperlessMCPException(Exception):  # noqa: N818
    """Base exception for all bridge errors."""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigException(PaperlessMCPException):
    """Exception for configuration errors.

    Raised when:
    - Required environment variables are missing
    - Service configuration is incomplete
    """

    def __init__(self, message: str, missing_vars: list[str] | None = None):
        details = {}
        if missing_vars:
            details["missing_vars"] = missing_vars
        super().__init__(message, details)
        self.missing_vars = missing_vars or []


class ServiceException(PaperlessMCPException):
    """Exception for failed collaborator calls.

    Raised when:
    - The Paperless API or RAG service is unreachable
    - A request times out
    - The service answers with a non-success status
    - The response body cannot be decoded
    """

    def __init__(self, message: str, service: str | None = None, status: int | None = None):
        details: dict = {}
        if service:
            details["service"] = service
        if status is not None:
            details["status"] = status
        super().__init__(message, details)
        self.service = service
        self.status = status


class NotFoundError(PaperlessMCPException):
    """Exception for resource not found errors.

    Raised when the Paperless API answers 404 for a document, tag or
    correspondent.
    """

    def __init__(self, resource_type: str, resource_id: int | str):
        message = f"{resource_type} not found: {resource_id}"
        details = {
            "resource_type": resource_type,
            "resource_id": str(resource_id),
        }
        super().__init__(message, details)
        self.resource_type = resource_type
        self.resource_id = resource_id


class UnknownToolError(PaperlessMCPException):
    """Raised by the dispatcher when a client calls a tool that does not exist."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}", {"tool_name": tool_name})
        self.tool_name = tool_name
