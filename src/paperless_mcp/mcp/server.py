"""MCP server for Paperless-AI document tools.

Provides the search_documents and get_document tools via the MCP protocol.
The same ``server`` instance is served over stdio (``run``) and over SSE by
the HTTP host in ``paperless_mcp.server.app``.
"""

from __future__ import annotations

import argparse
import asyncio
import inspect
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Tool

from paperless_mcp.core.exceptions import UnknownToolError
from paperless_mcp.core.logging import configure_logging, correlation_context, tool_logger
from paperless_mcp.core.response import ToolResponse, err

from .handlers.documents import get_document
from .handlers.search import search_documents
from .tools import DOCUMENT_TOOLS

logger = logging.getLogger(__name__)

SERVER_NAME = "paperless-ai"

server = Server(SERVER_NAME)


# ============================================================================
# Tool Handler Registry
# ============================================================================

TOOL_HANDLERS: dict[str, Callable[..., Awaitable[ToolResponse]]] = {
    "search_documents": search_documents,
    "get_document": get_document,
}


async def dispatch_tool(name: str, arguments: dict[str, Any] | None) -> ToolResponse:
    """Route a tool call to its handler.

    Raises:
        UnknownToolError: ``name`` is not a registered tool. This is the only
            failure that propagates; handlers report everything else inside
            the returned envelope.
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        raise UnknownToolError(name)

    arguments = arguments or {}
    with correlation_context():
        tool_logger.log_call(name, arguments)
        started = time.perf_counter()

        try:
            inspect.signature(handler).bind(**arguments)
        except TypeError as e:
            logger.warning(f"Invalid arguments for tool {name}: {e}")
            response = err(f"Invalid arguments for {name}: {e}")
        else:
            response = await handler(**arguments)

        tool_logger.log_result(name, not response.is_error, (time.perf_counter() - started) * 1000)
        return response


# ============================================================================
# MCP Server Protocol Implementation
# ============================================================================


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return DOCUMENT_TOOLS


@server.call_tool()
async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
    """Route tool calls to the appropriate handler."""
    response = await dispatch_tool(name, arguments)
    return response.to_call_tool_result()


# ============================================================================
# Server Entry Point
# ============================================================================


def run() -> None:
    """Run the MCP server over stdio."""
    parser = argparse.ArgumentParser(description="Paperless-AI MCP server (stdio transport)")
    parser.add_argument("--log-level", default=None, help="Override PAPERLESS_MCP_LOG_LEVEL")
    args = parser.parse_args()

    configure_logging(level=args.log_level)
    logger.info("Paperless-AI MCP server starting on stdio...")

    async def main():
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())

    asyncio.run(main())


if __name__ == "__main__":
    run()
