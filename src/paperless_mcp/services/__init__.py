"""Async clients for the services the MCP tools sit on top of."""

from .paperless import PaperlessClient, get_paperless_client
from .rag import RagClient, get_rag_client

__all__ = ["PaperlessClient", "RagClient", "get_paperless_client", "get_rag_client"]
