# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""Paperless-AI MCP server package."""

from .server import TOOL_HANDLERS, dispatch_tool, run, server
from .tools import DOCUMENT_TOOLS

__all__ = ["DOCUMENT_TOOLS", "TOOL_HANDLERS", "dispatch_tool", "run", "server"]
