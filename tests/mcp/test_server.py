"""Tests for the MCP server: tool listing and dispatch.

Tests cover:
1. list_tools - returns DOCUMENT_TOOLS
2. dispatch_tool - routing, unknown tools, argument binding
3. call_tool - conversion to CallToolResult
4. run - stdio entry point wiring
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from mcp.types import CallToolResult

from paperless_mcp.core.exceptions import UnknownToolError
from paperless_mcp.core.response import err, ok
from paperless_mcp.mcp.server import TOOL_HANDLERS, call_tool, dispatch_tool, list_tools, run
from paperless_mcp.mcp.tools import DOCUMENT_TOOLS

# ---------------------------------------------------------------------------
# Tests: list_tools
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_list_tools_returns_document_tools():
    """list_tools should return the DOCUMENT_TOOLS definition."""
    result = await list_tools()
    assert result == DOCUMENT_TOOLS
    assert [tool.name for tool in result] == ["search_documents", "get_document"]


@pytest.mark.asyncio
async def test_list_tools_is_stable():
    """Listing twice yields the same descriptors."""
    assert await list_tools() == await list_tools()


def test_every_tool_has_a_handler():
    assert set(TOOL_HANDLERS) == {tool.name for tool in DOCUMENT_TOOLS}


# ---------------------------------------------------------------------------
# Tests: dispatch_tool
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_dispatch_routes_to_handler():
    handler = AsyncMock(return_value=ok({"query": "invoice", "total_found": 0, "results": []}))

    with patch.dict(TOOL_HANDLERS, {"search_documents": handler}):
        result = await dispatch_tool("search_documents", {"query": "invoice", "max_results": 3})

    handler.assert_awaited_once_with(query="invoice", max_results=3)
    assert result.is_error is False
    assert result.payload["query"] == "invoice"


@pytest.mark.asyncio
async def test_dispatch_unknown_tool_raises():
    with pytest.raises(UnknownToolError) as exc_info:
        await dispatch_tool("delete_document", {"document_id": 1})

    assert exc_info.value.tool_name == "delete_document"
    assert "Unknown tool: delete_document" in str(exc_info.value)


@pytest.mark.asyncio
async def test_dispatch_passes_error_envelopes_through():
    handler = AsyncMock(return_value=err("Document retrieval error: boom"))

    with patch.dict(TOOL_HANDLERS, {"get_document": handler}):
        result = await dispatch_tool("get_document", {"document_id": 1})

    assert result.is_error is True
    assert result.error == "Document retrieval error: boom"


@pytest.mark.asyncio
async def test_dispatch_none_arguments():
    """A client sending no arguments reaches the handler with none."""

    async def no_arg_handler():
        return ok({"done": True})

    with patch.dict(TOOL_HANDLERS, {"ping": no_arg_handler}):
        result = await dispatch_tool("ping", None)

    assert result.payload == {"done": True}


@pytest.mark.asyncio
async def test_dispatch_missing_required_argument_is_enveloped():
    result = await dispatch_tool("get_document", {})

    assert result.is_error is True
    assert "Invalid arguments for get_document" in result.error


@pytest.mark.asyncio
async def test_dispatch_unexpected_argument_is_enveloped():
    result = await dispatch_tool("get_document", {"document_id": 1, "format": "pdf"})

    assert result.is_error is True
    assert "Invalid arguments for get_document" in result.error


@pytest.mark.asyncio
async def test_dispatch_logs_call_and_result():
    handler = AsyncMock(return_value=ok({}))
    fake_logger = MagicMock()

    with (
        patch.dict(TOOL_HANDLERS, {"get_document": handler}),
        patch("paperless_mcp.mcp.server.tool_logger", fake_logger),
    ):
        await dispatch_tool("get_document", {"document_id": 5})

    fake_logger.log_call.assert_called_once_with("get_document", {"document_id": 5})
    name, success, duration_ms = fake_logger.log_result.call_args.args
    assert name == "get_document"
    assert success is True
    assert duration_ms >= 0


@pytest.mark.asyncio
async def test_dispatch_search_end_to_end(rag_enabled, mock_rag_client, make_matches):
    """Scenario: 8 matches, no max_results -> total_found 8, 5 results."""
    mock_rag_client.search.return_value = make_matches(8)

    result = await dispatch_tool("search_documents", {"query": "invoice"})

    assert result.payload["total_found"] == 8
    assert len(result.payload["results"]) == 5


@pytest.mark.asyncio
async def test_dispatch_get_document_end_to_end(mock_paperless_client):
    """Scenario: tags [1, 2], tag 2 fails -> only the first name survives."""
    mock_paperless_client.get_document_content.return_value = "text"
    mock_paperless_client.get_document.return_value = {"title": "Doc", "tags": [1, 2], "correspondent": None}

    async def lookup(tag_id):
        if tag_id == 2:
            raise RuntimeError("tag lookup failed")
        return "finance"

    mock_paperless_client.get_tag_name_by_id.side_effect = lookup

    result = await dispatch_tool("get_document", {"document_id": 123})

    assert result.payload["id"] == 123
    assert result.payload["tags"] == ["finance"]


# ---------------------------------------------------------------------------
# Tests: call_tool
# ---------------------------------------------------------------------------


@pytest.mark.asyncio
async def test_call_tool_success_envelope():
    handler = AsyncMock(return_value=ok({"id": 1, "title": "Doc"}))

    with patch.dict(TOOL_HANDLERS, {"get_document": handler}):
        result = await call_tool("get_document", {"document_id": 1})

    assert isinstance(result, CallToolResult)
    assert result.isError is False
    assert len(result.content) == 1
    assert result.content[0].type == "text"
    assert json.loads(result.content[0].text) == {"id": 1, "title": "Doc"}


@pytest.mark.asyncio
async def test_call_tool_error_envelope(rag_disabled):
    result = await call_tool("search_documents", {"query": "invoice"})

    assert result.isError is True
    payload = json.loads(result.content[0].text)
    assert payload["error"].startswith("RAG service is not enabled")


@pytest.mark.asyncio
async def test_call_tool_unknown_tool_propagates():
    with pytest.raises(UnknownToolError, match="delete_document"):
        await call_tool("delete_document", {})


# ---------------------------------------------------------------------------
# Tests: run
# ---------------------------------------------------------------------------


def test_run_configures_logging_and_serves_stdio():
    with (
        patch("sys.argv", ["paperless-mcp-stdio", "--log-level", "DEBUG"]),
        patch("paperless_mcp.mcp.server.configure_logging") as mock_configure,
        patch("paperless_mcp.mcp.server.asyncio.run") as mock_run,
    ):
        run()

    mock_configure.assert_called_once_with(level="DEBUG")
    mock_run.assert_called_once()
    # Close the un-awaited coroutine handed to asyncio.run
    mock_run.call_args.args[0].close()
