# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""paperless-mcp - Model Context Protocol bridge for Paperless-AI.

Exposes two document tools to MCP clients:

- ``search_documents``: semantic RAG search over the document archive
- ``get_document``: full content and resolved metadata for one document
"""

__version__ = "1.0.0"
