"""HTTP host serving the MCP server over SSE."""
