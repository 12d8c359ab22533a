# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""Paperless-ngx REST API client.

Only the read endpoints the MCP tools need are wrapped: document metadata,
document content, and tag / correspondent name lookups.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ..core.config import get_config
from ..core.exceptions import NotFoundError, ServiceException

logger = logging.getLogger(__name__)

SERVICE_NAME = "paperless"


class PaperlessClient:
    """Async client for the Paperless-ngx API.

    Args:
        api_url: Base API URL, e.g. ``http://paperless:8000/api``.
        api_token: Paperless API token, sent as ``Authorization: Token <token>``.
        timeout: Total timeout in seconds per request.
    """

    def __init__(self, api_url: str, api_token: str, timeout: float = 30.0):
        self.api_url = api_url.rstrip("/")
        self.api_token = api_token
        self.timeout = timeout

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if self.api_token:
            headers["Authorization"] = f"Token {self.api_token}"
        return headers

    async def _get_json(self, path: str, resource_type: str, resource_id: int) -> Any:
        """GET ``path`` and decode the JSON body.

        Raises:
            NotFoundError: The API answered 404.
            ServiceException: Any other failure talking to the API.
        """
        url = f"{self.api_url}{path}"

        try:
            async with aiohttp.ClientSession(headers=self.headers) as session:
                async with session.get(url, timeout=aiohttp.ClientTimeout(total=self.timeout)) as response:
                    if response.status == 404:
                        raise NotFoundError(resource_type, resource_id)
                    if response.status != 200:
                        raise ServiceException(
                            f"Paperless API returned HTTP {response.status} for {path}",
                            service=SERVICE_NAME,
                            status=response.status,
                        )
                    return await response.json()
        except aiohttp.ClientError as e:
            raise ServiceException(f"Paperless API request to {path} failed: {e}", service=SERVICE_NAME) from e
        except asyncio.TimeoutError as e:
            raise ServiceException(
                f"Paperless API request to {path} timed out after {self.timeout}s",
                service=SERVICE_NAME,
            ) from e

    async def get_document(self, document_id: int) -> dict[str, Any]:
        """Fetch document metadata.

        Returns the raw API object: ``title``, ``tags`` (IDs),
        ``correspondent`` (ID or None), ``created``, ``document_type``,
        ``added``, ``modified`` and more.
        """
        data = await self._get_json(f"/documents/{document_id}/", "Document", document_id)
        if not isinstance(data, dict):
            raise ServiceException(f"Unexpected document payload for {document_id}", service=SERVICE_NAME)
        return data

    async def get_document_content(self, document_id: int) -> str:
        """Fetch the OCR'd text content of a document."""
        data = await self._get_json(f"/documents/{document_id}/", "Document", document_id)
        return (data or {}).get("content") or ""

    async def get_tag_name_by_id(self, tag_id: int) -> str:
        """Resolve a tag ID to its name."""
        data = await self._get_json(f"/tags/{tag_id}/", "Tag", tag_id)
        name = (data or {}).get("name")
        if name is None:
            raise ServiceException(f"Tag {tag_id} has no name", service=SERVICE_NAME)
        return name

    async def get_correspondent_name_by_id(self, correspondent_id: int) -> dict[str, str] | None:
        """Resolve a correspondent ID to ``{"name": ...}``.

        Returns None when the correspondent does not exist.
        """
        try:
            data = await self._get_json(f"/correspondents/{correspondent_id}/", "Correspondent", correspondent_id)
        except NotFoundError:
            logger.debug(f"Correspondent {correspondent_id} not found")
            return None
        name = (data or {}).get("name")
        return {"name": name} if name is not None else None


_paperless_client: PaperlessClient | None = None


def get_paperless_client() -> PaperlessClient:
    """Get the global Paperless client, built from configuration on first use."""
    global _paperless_client
    if _paperless_client is None:
        config = get_config()
        _paperless_client = PaperlessClient(
            api_url=config.paperless_api_url,
            api_token=config.paperless_api_token,
            timeout=config.request_timeout,
        )
    return _paperless_client


def clear_paperless_client() -> None:
    """Drop the global client so the next call rebuilds it. Useful for testing."""
    global _paperless_client
    _paperless_client = None
