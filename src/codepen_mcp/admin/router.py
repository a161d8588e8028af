"""Admin API routes for health and stats."""

from mcp.server.fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse

from codepen_mcp.admin.service import get_stats


async def health_check(request: Request) -> JSONResponse:
    """Health check endpoint for container orchestration.

    Returns:
        JSONResponse with status: healthy
    """
    return JSONResponse({"status": "healthy"})


async def api_stats(request: Request) -> JSONResponse:
    """Get server statistics and metrics as JSON.

    Returns:
        JSONResponse with uptime and tool-call metrics
    """
    return JSONResponse(get_stats())


def register_admin_routes(mcp: FastMCP) -> None:
    """Register the HTTP side routes served alongside the HTTP transports.

    Args:
        mcp: FastMCP server instance to register routes on
    """
    mcp.custom_route("/healthz", methods=["GET"])(health_check)
    mcp.custom_route("/api/stats", methods=["GET"])(api_stats)
