# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""Document tool definitions.

Contains DOCUMENT_TOOLS, the fixed list of tools advertised to MCP clients.

Tool list:
    search_documents   Semantic RAG search over the document archive
    get_document       Full content and metadata for one document
"""

from __future__ import annotations

from mcp.types import Tool

DEFAULT_MAX_RESULTS = 5

DOCUMENT_TOOLS = [
    Tool(
        name="search_documents",
        description="Search documents using Paperless-AI's semantic RAG search",
        inputSchema={
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": "Search terms or semantic query",
                },
                "max_results": {
                    "type": "number",
                    "description": "Maximum documents to return",
                    "default": DEFAULT_MAX_RESULTS,
                },
                "from_date": {
                    "type": "string",
                    "description": "Filter from date (YYYY-MM-DD)",
                },
                "to_date": {
                    "type": "string",
                    "description": "Filter to date (YYYY-MM-DD)",
                },
                "correspondent": {
                    "type": "string",
                    "description": "Filter by correspondent name",
                },
            },
            "required": ["query"],
        },
    ),
    Tool(
        name="get_document",
        description="Retrieve full document content and metadata by document ID",
        inputSchema={
            "type": "object",
            "properties": {
                "document_id": {
                    "type": "number",
                    "description": "Document ID from search results",
                },
            },
            "required": ["document_id"],
        },
    ),
]
