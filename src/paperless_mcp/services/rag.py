# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""Client for the Paperless-AI semantic search (RAG) service."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ..core.config import get_config
from ..core.exceptions import ServiceException

logger = logging.getLogger(__name__)

SERVICE_NAME = "rag"


class RagClient:
    """Async client for the RAG service ``/search`` endpoint.

    The service returns matches ordered by relevance, highest first, and does
    not cap the number of results.
    """

    def __init__(self, base_url: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def search(
        self,
        query: str,
        from_date: str | None = None,
        to_date: str | None = None,
        correspondent: str | None = None,
    ) -> list[dict[str, Any]]:
        """Run a semantic search.

        Args:
            query: Free-text or semantic query.
            from_date: Optional lower date bound (YYYY-MM-DD).
            to_date: Optional upper date bound (YYYY-MM-DD).
            correspondent: Optional correspondent name filter.

        Returns:
            Matches as dicts with ``doc_id``, ``title``, ``score`` and either
            ``snippet`` or ``text``.

        Raises:
            ServiceException: The service is unreachable or answered with an error.
        """
        body: dict[str, Any] = {"query": query}
        filters = {"from_date": from_date, "to_date": to_date, "correspondent": correspondent}
        body.update({key: value for key, value in filters.items() if value is not None})

        url = f"{self.base_url}/search"
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    url,
                    json=body,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if response.status != 200:
                        raise ServiceException(
                            f"RAG service returned HTTP {response.status}",
                            service=SERVICE_NAME,
                            status=response.status,
                        )
                    data = await response.json()
        except aiohttp.ClientError as e:
            raise ServiceException(f"RAG service request failed: {e}", service=SERVICE_NAME) from e
        except asyncio.TimeoutError as e:
            raise ServiceException(
                f"RAG service request timed out after {self.timeout}s",
                service=SERVICE_NAME,
            ) from e

        if isinstance(data, dict):
            data = data.get("results")
        if not isinstance(data, list):
            raise ServiceException("RAG service returned an unexpected payload", service=SERVICE_NAME)

        logger.debug(f"RAG search for {query!r} returned {len(data)} matches")
        return data


_rag_client: RagClient | None = None


def get_rag_client() -> RagClient:
    """Get the global RAG client, built from configuration on first use."""
    global _rag_client
    if _rag_client is None:
        config = get_config()
        _rag_client = RagClient(base_url=config.rag_service_url, timeout=config.request_timeout)
    return _rag_client


def clear_rag_client() -> None:
    """Drop the global client so the next call rebuilds it. Useful for testing."""
    global _rag_client
    _rag_client = None
