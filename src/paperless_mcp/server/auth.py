# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""API key authentication for the SSE MCP endpoints."""

from __future__ import annotations

import logging
import secrets

from starlette.requests import Request

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_api_key(request: Request) -> str | None:
    """Pull the presented key from ``Authorization: Bearer`` or ``x-api-key``."""
    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith(BEARER_PREFIX):
        return auth_header[len(BEARER_PREFIX) :].strip() or None
    return request.headers.get("x-api-key") or None


def verify_api_key(presented: str | None, expected: str) -> bool:
    """Constant-time comparison of the presented key against the configured one.

    An empty configured key never authenticates anybody.
    """
    if not presented or not expected:
        return False
    return secrets.compare_digest(presented.encode(), expected.encode())


def authenticate_request(request: Request, expected: str) -> bool:
    """Return True when the request carries the configured API key."""
    presented = extract_api_key(request)
    if presented is None:
        logger.debug(f"Missing API key on {request.url.path}")
        return False
    if not verify_api_key(presented, expected):
        logger.warning(f"Invalid API key presented on {request.url.path}")
        return False
    return True
