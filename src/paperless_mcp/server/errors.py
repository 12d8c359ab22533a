# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""Standardized HTTP error responses for the host endpoints.

Format:
{
    "success": false,
    "error": {
        "code": "ERROR_CODE",
        "message": "Human readable message"
    }
}
"""

from __future__ import annotations

from starlette.responses import JSONResponse

AUTH_MISSING_TOKEN = "AUTH_MISSING_TOKEN"
AUTH_INVALID_TOKEN = "AUTH_INVALID_TOKEN"
SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"


def error_response(
    code: str,
    message: str,
    status_code: int = 400,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Create a standardized error response."""
    return JSONResponse(
        {
            "success": False,
            "error": {
                "code": code,
                "message": message,
            },
        },
        status_code=status_code,
        headers=headers,
    )


def auth_error(message: str = "Authentication failed", code: str = AUTH_INVALID_TOKEN) -> JSONResponse:
    """Create a 401 authentication error response."""
    return error_response(code, message, status_code=401, headers={"WWW-Authenticate": 'Bearer realm="mcp"'})


def service_unavailable_error(message: str) -> JSONResponse:
    """Create a 503 service unavailable error response."""
    return error_response(SERVICE_UNAVAILABLE, message, status_code=503)
