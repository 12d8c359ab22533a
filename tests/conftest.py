"""Global test fixtures for the paperless-mcp test suite."""

from __future__ import annotations

import os
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

ENV_PREFIXES = ("PAPERLESS_", "RAG_SERVICE_")
ENV_NAMES = ("API_KEY",)


# ============================================================================
# Global state
# ============================================================================


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached config, settings and collaborator clients between tests."""
    from paperless_mcp.core.config import clear_config_cache
    from paperless_mcp.server.config import clear_settings_cache
    from paperless_mcp.services.paperless import clear_paperless_client
    from paperless_mcp.services.rag import clear_rag_client

    def reset():
        clear_config_cache()
        clear_settings_cache()
        clear_paperless_client()
        clear_rag_client()

    reset()
    yield
    reset()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all bridge-related environment variables."""
    for key in list(os.environ.keys()):
        if key.startswith(ENV_PREFIXES) or key in ENV_NAMES:
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def rag_enabled(monkeypatch, clean_env):
    """Enable the RAG capability gate."""
    monkeypatch.setenv("RAG_SERVICE_ENABLED", "true")


@pytest.fixture
def rag_disabled(monkeypatch, clean_env):
    """Disable the RAG capability gate."""
    monkeypatch.setenv("RAG_SERVICE_ENABLED", "false")


# ============================================================================
# Collaborator mocks
# ============================================================================


@pytest.fixture
def mock_rag_client():
    """Patch the search handler's RAG client with an AsyncMock."""
    client = MagicMock()
    client.search = AsyncMock(return_value=[])
    with patch("paperless_mcp.mcp.handlers.search.get_rag_client", return_value=client):
        yield client


@pytest.fixture
def mock_paperless_client():
    """Patch the retrieval handler's Paperless client with AsyncMocks."""
    client = MagicMock()
    client.get_document_content = AsyncMock(return_value="")
    client.get_document = AsyncMock(return_value={})
    client.get_tag_name_by_id = AsyncMock()
    client.get_correspondent_name_by_id = AsyncMock(return_value=None)
    with patch("paperless_mcp.mcp.handlers.documents.get_paperless_client", return_value=client):
        yield client


@pytest.fixture
def make_matches():
    """Factory building ``count`` search matches ordered by descending score."""

    def _make(count: int) -> list[dict[str, Any]]:
        return [
            {
                "doc_id": i + 1,
                "title": f"Invoice {i + 1}",
                "score": round(1.0 - i * 0.05, 2),
                "text": f"Invoice number {i + 1} " + "x" * 300,
            }
            for i in range(count)
        ]

    return _make


# ============================================================================
# aiohttp mocks
# ============================================================================


@pytest.fixture
def http_response():
    """Factory for aiohttp responses usable as ``async with session.get(...)``."""

    def _make(status: int = 200, json_data: Any = None) -> AsyncMock:
        response = AsyncMock()
        response.status = status
        response.json = AsyncMock(return_value=json_data)
        response.__aenter__ = AsyncMock(return_value=response)
        response.__aexit__ = AsyncMock(return_value=None)
        return response

    return _make


@pytest.fixture
def http_session():
    """Factory for aiohttp ClientSessions whose get/post return ``response``."""

    def _make(response: Any = None, side_effect: Any = None) -> AsyncMock:
        session = AsyncMock()
        session.get = MagicMock(return_value=response, side_effect=side_effect)
        session.post = MagicMock(return_value=response, side_effect=side_effect)
        session.__aenter__ = AsyncMock(return_value=session)
        session.__aexit__ = AsyncMock(return_value=None)
        return session

    return _make
