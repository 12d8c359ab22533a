"""Starlette ASGI application for the Paperless-AI MCP server.

Serves the MCP server over a persistent SSE connection:

- ``GET  /mcp/sse``       opens the event stream
- ``POST /mcp/messages/`` carries client messages for an open stream
- ``GET  /health``        liveness and configuration summary

Both MCP routes require the configured API key as a Bearer token.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route
from starlette.types import Receive, Scope, Send

from paperless_mcp.core.exceptions import ConfigException
from paperless_mcp.core.logging import configure_logging
from paperless_mcp.mcp.server import server as mcp_server

from .auth import authenticate_request, extract_api_key
from .config import get_settings
from .errors import AUTH_MISSING_TOKEN, auth_error, service_unavailable_error

logger = logging.getLogger(__name__)

SSE_PATH = "/mcp/sse"
MESSAGES_PATH = "/mcp/messages/"

sse_transport = SseServerTransport(MESSAGES_PATH)


def _reject_unauthenticated(request: Request) -> Response | None:
    """Return an error response when the request may not use the MCP routes."""
    settings = get_settings()
    if not settings.api_key:
        logger.error("API key is not configured; refusing MCP connections")
        return service_unavailable_error("MCP endpoint is not configured: set API_KEY")

    if extract_api_key(request) is None:
        return auth_error("Missing API key", code=AUTH_MISSING_TOKEN)
    if not authenticate_request(request, settings.api_key):
        return auth_error("Invalid API key")
    return None


async def health_endpoint(request: Request) -> JSONResponse:
    """Health check endpoint."""
    settings = get_settings()

    health_data: dict[str, Any] = {
        "status": "healthy",
        "server": settings.server_name,
        "version": settings.server_version,
        "rag_service_enabled": settings.rag_service_enabled,
    }
    return JSONResponse(health_data)


async def sse_endpoint(request: Request) -> Response:
    """Open an MCP session over Server-Sent Events."""
    rejection = _reject_unauthenticated(request)
    if rejection is not None:
        return rejection

    logger.info(f"MCP SSE connection opened from {request.client.host if request.client else 'unknown'}")
    async with sse_transport.connect_sse(request.scope, request.receive, request._send) as (read_stream, write_stream):
        await mcp_server.run(read_stream, write_stream, mcp_server.create_initialization_options())
    logger.info("MCP SSE connection closed")

    # The transport already sent the response; Starlette still expects one back.
    return Response()


async def messages_app(scope: Scope, receive: Receive, send: Send) -> None:
    """ASGI app forwarding authenticated client messages to the SSE transport."""
    request = Request(scope, receive)
    rejection = _reject_unauthenticated(request)
    if rejection is not None:
        await rejection(scope, receive, send)
        return
    await sse_transport.handle_post_message(scope, receive, send)


@asynccontextmanager
async def lifespan(app: Starlette):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(f"Starting Paperless-AI MCP server on {settings.host}:{settings.port}")

    if not settings.api_key:
        logger.warning("API key not configured! Set API_KEY to accept MCP connections.")
    if not settings.rag_service_enabled:
        logger.info("RAG service disabled: search_documents will report an error")

    yield

    logger.info("Paperless-AI MCP server shutting down")


def create_app() -> Starlette:
    """Create the Starlette ASGI application."""
    settings = get_settings()

    routes = [
        Route("/health", health_endpoint, methods=["GET"]),
        Route(SSE_PATH, sse_endpoint, methods=["GET"]),
        Mount(MESSAGES_PATH, app=messages_app),
    ]

    middleware = [
        Middleware(
            CORSMiddleware,
            allow_origins=settings.allowed_origins,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["Authorization", "Content-Type", "x-api-key"],
        ),
    ]

    return Starlette(
        routes=routes,
        middleware=middleware,
        lifespan=lifespan,
    )


def run() -> None:
    """Run the server using uvicorn."""
    import uvicorn

    configure_logging()
    settings = get_settings()

    if not settings.api_key:
        raise ConfigException("API_KEY must be set to serve MCP over HTTP", missing_vars=["API_KEY"])

    logger.info(f"Starting Paperless-AI MCP HTTP server on {settings.host}:{settings.port}")

    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
