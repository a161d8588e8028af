"""MCP tools for CodePen pens.

This module provides the functionality exposed as MCP tools:
- get_pen_metadata: oEmbed metadata (title, author, thumbnail, embed HTML)
- get_pen: Full pen source scraped from the pen page
- get_pen_embed_html: Embed iframe HTML with an optional height

The tools module follows a router -> service pattern:
- router.py: MCP tool definitions, registration and error envelopes
- service.py: Business logic for the oEmbed and pen page requests
"""

from codepen_mcp.tools.router import (
    get_pen,
    get_pen_embed_html,
    get_pen_metadata,
    register_pen_tools,
)
from codepen_mcp.tools.service import (
    OEMBED_URL,
    fetch_pen,
    fetch_pen_metadata,
)

__all__ = [
    # MCP tool functions
    "get_pen_metadata",
    "get_pen",
    "get_pen_embed_html",
    # Registration functions
    "register_pen_tools",
    # Service functions
    "fetch_pen",
    "fetch_pen_metadata",
    "OEMBED_URL",
]
