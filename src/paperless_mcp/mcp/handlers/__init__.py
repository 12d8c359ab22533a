"""MCP tool handlers."""

from .documents import get_document
from .search import search_documents

__all__ = ["get_document", "search_documents"]
