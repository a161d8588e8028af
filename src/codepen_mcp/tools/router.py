"""MCP tool definitions for CodePen pens."""

from __future__ import annotations

import json
import logging
import time
from collections.abc import Awaitable, Callable
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel, Field

from codepen_mcp.errors import PenError
from codepen_mcp.metrics import record_call
from codepen_mcp.models import PenEmbedResponse, PenMetadataResponse
from codepen_mcp.tools.service import fetch_pen, fetch_pen_metadata
from codepen_mcp.urls import normalize_pen_url

logger = logging.getLogger(__name__)

PenUrl = Annotated[
    str,
    Field(
        description=(
            "Full CodePen URL (e.g. https://codepen.io/johndjameson/pen/DwxMqa) "
            "or slug (e.g. johndjameson/pen/DwxMqa)"
        )
    ),
]


def text_result(text: str, is_error: bool = False) -> CallToolResult:
    """Wrap text in a single-item tool result."""
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


async def run_tool(
    tool: str,
    pen_url: str,
    call: Callable[[], Awaitable[BaseModel]],
) -> CallToolResult:
    """Run a tool body and convert its outcome into a tool result.

    Errors never propagate: they become an ``Error: <message>`` result with
    ``isError`` set.

    Args:
        tool: Tool name, for logging and metrics
        pen_url: Pen reference as supplied by the caller
        call: Coroutine factory producing the response model

    Returns:
        CallToolResult with pretty-printed JSON or the error text
    """
    start = time.perf_counter()
    try:
        payload = await call()
    except PenError as e:
        message = str(e)
        logger.info(f"{tool}({pen_url!r}) failed: {message}")
    except Exception as e:
        message = f"{type(e).__name__}: {e}"
        logger.exception(f"{tool}({pen_url!r}) raised unexpectedly")
    else:
        elapsed_ms = (time.perf_counter() - start) * 1000
        record_call(tool, pen_url, success=True, elapsed_ms=elapsed_ms)
        return text_result(json.dumps(payload.model_dump(mode="json"), indent=2))

    elapsed_ms = (time.perf_counter() - start) * 1000
    record_call(tool, pen_url, success=False, elapsed_ms=elapsed_ms, error=message)
    return text_result(f"Error: {message}", is_error=True)


async def get_pen_metadata(pen_url: PenUrl) -> CallToolResult:
    """Fetch CodePen pen metadata from the official oEmbed API.

    Returns title, author, thumbnail, and embed iframe HTML. Does not include
    source code. Use when you only need metadata or an embed snippet.
    """

    async def call() -> PenMetadataResponse:
        url = normalize_pen_url(pen_url)
        metadata = await fetch_pen_metadata(url)
        return PenMetadataResponse.from_metadata(url, metadata)

    return await run_tool("get_pen_metadata", pen_url, call)


async def get_pen(pen_url: PenUrl) -> CallToolResult:
    """Fetch a CodePen pen's full source by parsing the public pen page.

    Returns HTML, CSS, JS, metadata, tags, external resources, preprocessors
    and author. Use when you need to ingest, inspect, or understand the code.
    Note: this parses the pen page and may break if CodePen changes their
    front-end.
    """
    return await run_tool("get_pen", pen_url, lambda: fetch_pen(pen_url))


async def get_pen_embed_html(
    pen_url: PenUrl,
    height: Annotated[
        int | None,
        Field(description="Optional iframe height in pixels (default from oEmbed)"),
    ] = None,
) -> CallToolResult:
    """Get the iframe embed HTML for a CodePen pen via oEmbed.

    Use when the user wants embed code to paste into a blog or page.
    """

    async def call() -> PenEmbedResponse:
        url = normalize_pen_url(pen_url)
        metadata = await fetch_pen_metadata(url, height=height)
        return PenEmbedResponse(pen_url=url, title=metadata.title, embed_html=metadata.html)

    return await run_tool("get_pen_embed_html", pen_url, call)


def register_pen_tools(mcp: FastMCP) -> None:
    """Register the CodePen tools on the MCP server.

    Args:
        mcp: FastMCP server instance to register tools on
    """
    mcp.tool(title="Get Pen Metadata")(get_pen_metadata)
    mcp.tool(title="Get Pen (Full Source)")(get_pen)
    mcp.tool(title="Get Pen Embed HTML")(get_pen_embed_html)
