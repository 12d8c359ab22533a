# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""Document retrieval tool handler.

Content and metadata are required: if either fetch fails the whole call
fails. Tag and correspondent names are enrichment: a failed lookup is logged
and the label is left out.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from paperless_mcp.core.response import ToolResponse, err, ok
from paperless_mcp.services.paperless import PaperlessClient, get_paperless_client

logger = logging.getLogger(__name__)


async def _resolve_tag_names(client: PaperlessClient, tag_ids: list[int]) -> list[str]:
    """Resolve all tag IDs concurrently, dropping the ones that fail.

    Surviving names keep the order of ``tag_ids``.
    """
    if not tag_ids:
        return []

    outcomes = await asyncio.gather(
        *(client.get_tag_name_by_id(tag_id) for tag_id in tag_ids),
        return_exceptions=True,
    )

    names = []
    for tag_id, outcome in zip(tag_ids, outcomes):
        if isinstance(outcome, BaseException):
            logger.warning(f"Error fetching tag name for ID {tag_id}: {outcome}")
            continue
        names.append(outcome)
    return names



async def _resolve_correspondent(client: PaperlessClient, correspondent_id: int | None) -> str | None:
    if not correspondent_id:
        return None
    try:
        correspondent = await client.get_correspondent_name_by_id(correspondent_id)
        return (correspondent or {}).get("name") or None
    except Exception as e:
        logger.warning(f"Error fetching correspondent name for ID {correspondent_id}: {e}")
        return None


async def get_document(document_id: int | float) -> ToolResponse:
    """Retrieve a document's content together with its resolved metadata."""
    try:
        client = get_paperless_client()
        doc_id = int(document_id)
        content, metadata = await asyncio.gather(
            client.get_document_content(doc_id),
            client.get_document(doc_id),
        )

        tags, correspondent = await asyncio.gather(
            _resolve_tag_names(client, metadata.get("tags") or []),
            _resolve_correspondent(client, metadata.get("correspondent")),
        )

        document: dict[str, Any] = {
            "id": doc_id,
            "title": metadata.get("title"),
            "content": content,
            "tags": tags,
            "correspondent": correspondent,
            "created": metadata.get("created"),
            "document_type": metadata.get("document_type"),
            "added": metadata.get("added"),
            "modified": metadata.get("modified"),
        }
    except Exception as e:
        logger.exception(f"Document retrieval error for {document_id}")
        return err(f"Document retrieval error: {e}")

    return ok(document)
