# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Paperless MCP Contributors

"""Response envelope returned by every MCP tool handler.

Handlers never raise past their own boundary. They return a ``ToolResponse``
that is either a success payload or an error payload, and the protocol layer
serialises it as::

    {"content": [{"type": "text", "text": "<json payload>"}]}

with ``"isError": true`` added on failure.

Usage::

    from paperless_mcp.core.response import ok, err

    return ok({"query": query, "results": results})
    return err(f"Search error: {exc}")
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from mcp.types import CallToolResult, TextContent


@dataclass(frozen=True)
class ToolResponse:
    """Tagged result of one tool invocation.

    Attributes:
        payload:  JSON-serialisable body. On failure it is ``{"error": message}``.
        is_error: True when the payload describes a domain failure.
    """

    payload: dict[str, Any] = field(default_factory=dict)
    is_error: bool = False

    @property
    def error(self) -> str | None:
        """The error message, or None for successful responses."""
        if not self.is_error:
            return None
        return self.payload.get("error")

    def to_text(self) -> str:
        """JSON-encode the payload the way clients read it."""
        return json.dumps(self.payload, indent=2, default=str)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the plain envelope structure.

        ``isError`` is only present on failures.
        """
        envelope: dict[str, Any] = {"content": [{"type": "text", "text": self.to_text()}]}
        if self.is_error:
            envelope["isError"] = True
        return envelope

    def to_call_tool_result(self) -> CallToolResult:
        """Convert to the MCP SDK result type."""
        return CallToolResult(
            content=[TextContent(type="text", text=self.to_text())],
            isError=self.is_error,
        )


def ok(payload: dict[str, Any]) -> ToolResponse:
    """Create a successful ToolResponse."""
    return ToolResponse(payload=payload)


def err(message: str) -> ToolResponse:
    """Create a failed ToolResponse carrying ``{"error": message}``."""
    return ToolResponse(payload={"error": message}, is_error=True)
