"""Live smoke check against CodePen.

Runs URL normalization, the oEmbed request and the pen page extraction for
one pen and prints a short summary. Usage::

    python -m codepen_mcp.smoke [pen_url]
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any

from codepen_mcp.errors import PenError
from codepen_mcp.tools.service import fetch_pen, fetch_pen_metadata
from codepen_mcp.urls import normalize_pen_url

logger = logging.getLogger(__name__)

DEFAULT_PEN = "https://codepen.io/johndjameson/pen/DwxMqa"


async def smoke_check(pen_ref: str = DEFAULT_PEN) -> dict[str, Any]:
    """Exercise every CodePen request for one pen.

    Args:
        pen_ref: Pen URL or slug

    Returns:
        Summary of the metadata and extracted source

    Raises:
        PenError: If any step fails
    """
    pen_url = normalize_pen_url(pen_ref)
    metadata = await fetch_pen_metadata(pen_url)
    pen = await fetch_pen(pen_url)

    return {
        "pen_url": pen_url,
        "metadata": {
            "title": metadata.title,
            "author_name": metadata.author_name,
        },
        "pen": {
            "title": pen.title,
            "tags": pen.tags,
            "html_length": len(pen.html),
            "css_length": len(pen.css),
            "js_length": len(pen.js),
            "resources": len(pen.resources),
            "css_pre_processor": pen.css_pre_processor,
            "author": pen.author.username if pen.author else None,
        },
    }


def main() -> None:
    """Main entry point."""
    logging.basicConfig(level=logging.INFO, stream=sys.stderr)

    pen_ref = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_PEN

    try:
        summary = asyncio.run(smoke_check(pen_ref))
    except PenError as e:
        logger.error(f"Smoke check failed for {pen_ref}: {e}")
        sys.exit(1)

    for section in ("metadata", "pen"):
        print(f"{section}:")
        for key, value in summary[section].items():
            print(f"  {key}: {value}")
    print(f"OK {summary['pen_url']}")


if __name__ == "__main__":
    main()
