# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""Search tool handler."""

from __future__ import annotations

import logging
from typing import Any

from paperless_mcp.core.config import get_config
from paperless_mcp.core.response import ToolResponse, err, ok
from paperless_mcp.services.rag import get_rag_client

from ..tools import DEFAULT_MAX_RESULTS

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 200

RAG_DISABLED_MESSAGE = "RAG service is not enabled. Please enable it in your environment configuration."


def _resolve_limit(max_results: Any) -> int:
    """Falsy or negative limits fall back to the default."""
    if not max_results:
        return DEFAULT_MAX_RESULTS
    limit = int(max_results)
    return limit if limit > 0 else DEFAULT_MAX_RESULTS


def _project(match: dict[str, Any]) -> dict[str, Any]:
    snippet = match.get("snippet")
    if not snippet:
        text = match.get("text")
        snippet = text[:SNIPPET_LENGTH] if isinstance(text, str) else None
    return {
        "doc_id": match.get("doc_id"),
        "title": match.get("title"),
        "score": match.get("score"),
        "snippet": snippet,
    }


async def search_documents(
    query: str,
    max_results: int | float | None = DEFAULT_MAX_RESULTS,
    from_date: str | None = None,
    to_date: str | None = None,
    correspondent: str | None = None,
) -> ToolResponse:
    """Semantic search over the archive.

    ``total_found`` always carries the untruncated match count so clients
    can tell when ``results`` was cut to ``max_results``.
    """
    if not get_config().rag_service_enabled:
        return err(RAG_DISABLED_MESSAGE)

    try:
        if not query or not str(query).strip():
            raise ValueError("query must be non-empty")
        limit = _resolve_limit(max_results)

        results = await get_rag_client().search(
            query,
            from_date=from_date,
            to_date=to_date,
            correspondent=correspondent,
        )

        return ok(
            {
                "query": query,
                "total_found": len(results),
                "results": [_project(match) for match in results[:limit]],
            }
        )
    except Exception as e:
        logger.exception(f"Search error for query {query!r}")
        return err(f"Search error: {e}")
