"""MCP server for CodePen pens."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from codepen_mcp.admin import register_admin_routes
from codepen_mcp.tools import register_pen_tools

logger = logging.getLogger(__name__)

TRANSPORTS = ("stdio", "sse", "streamable-http")


def create_server() -> FastMCP:
    """Create the MCP server with the CodePen tools and admin routes registered."""
    mcp = FastMCP(
        "codepen-mcp",
        instructions=(
            "Ingest and inspect CodePen pens via oEmbed and pen page parsing. "
            "Pens are addressed by full URL (https://codepen.io/user/pen/slug) "
            "or by slug (user/pen/slug)."
        ),
        stateless_http=True,
    )
    register_pen_tools(mcp)
    register_admin_routes(mcp)
    return mcp


mcp = create_server()


def run_server(transport: str = "stdio", host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run the MCP server.

    Args:
        transport: Transport type ('stdio', 'sse' or 'streamable-http')
        host: Host to bind to for the HTTP transports
        port: Port to bind to for the HTTP transports

    Raises:
        ValueError: If the transport is not supported
    """
    if transport not in TRANSPORTS:
        raise ValueError(f"Unsupported transport '{transport}', expected one of {', '.join(TRANSPORTS)}")

    mcp.settings.host = host
    mcp.settings.port = port

    logger.info(f"Starting CodePen MCP server with {transport} transport")
    mcp.run(transport=transport)


if __name__ == "__main__":
    run_server()
