"""Pytest configuration and fixtures for codepen-mcp tests."""

from __future__ import annotations

import json
from typing import Any

import pytest

from codepen_mcp.metrics import reset_metrics
from codepen_mcp.providers import FetchResult

PEN_URL = "https://codepen.io/johndjameson/pen/DwxMqa"


def make_pen_page_html(item: Any, profiled: dict[str, Any] | None = None) -> str:
    """Build a minimal pen page embedding ``item`` the way CodePen does.

    ``__item`` is JSON encoded twice: the outer encoding turns the inner JSON
    document into a quoted string value.
    """
    item_str = json.dumps(json.dumps(item))
    profiled_str = f',"__profiled":{json.dumps(profiled)}' if profiled is not None else ""
    return f'<html><body><script>var d = {{"__item":{item_str}{profiled_str}}};</script></body></html>'


def make_fetch_result(
    content: str = "",
    status_code: int = 200,
    reason: str = "OK",
    url: str = PEN_URL,
) -> FetchResult:
    """Build a FetchResult as returned by the provider."""
    return FetchResult(
        url=url,
        status_code=status_code,
        reason=reason,
        content=content,
        content_type="text/html; charset=utf-8",
    )


@pytest.fixture(autouse=True)
def fresh_metrics() -> None:
    """Start every test with empty tool-call metrics."""
    reset_metrics()


@pytest.fixture
def pen_item() -> dict[str, Any]:
    """A decoded __item payload for a typical pen."""
    return {
        "title": "Responsive Sidenotes V2",
        "description": "A responsive sidenotes demo.",
        "html": '<article class="post"><p>Hello</p></article>',
        "css": "body { color: red; }",
        "js": "console.log('hi');",
        "tags": ["layout", "text", "responsive", "rwd", "simple"],
        "resources": [
            {
                "url": "//cdnjs.cloudflare.com/ajax/libs/jquery/2.1.3/jquery.min.js",
                "resource_type": "js",
                "order": 0,
            },
        ],
        "html_pre_processor": "none",
        "css_pre_processor": "scss",
        "js_pre_processor": "none",
        "hashid": "DwxMqa",
    }


@pytest.fixture
def profiled() -> dict[str, str]:
    """A __profiled payload for the pen owner."""
    return {"username": "johndjameson", "name": "John D. Jameson"}


@pytest.fixture
def pen_page_html(pen_item: dict[str, Any], profiled: dict[str, str]) -> str:
    """Pen page carrying both __item and __profiled."""
    return make_pen_page_html(pen_item, profiled)


@pytest.fixture
def oembed_body() -> dict[str, Any]:
    """A successful oEmbed response body."""
    return {
        "success": True,
        "type": "rich",
        "version": "1.0",
        "provider_name": "CodePen",
        "provider_url": "https://codepen.io",
        "title": "Responsive Sidenotes V2",
        "author_name": "John D. Jameson",
        "author_url": "https://codepen.io/johndjameson",
        "height": "300",
        "width": "600",
        "thumbnail_url": "https://shots.codepen.io/johndjameson/pen/DwxMqa-512.jpg",
        "thumbnail_width": "384",
        "thumbnail_height": "225",
        "html": "<iframe id=\"cp_embed_DwxMqa\" src=\"https://codepen.io/johndjameson/embed/preview/DwxMqa\"></iframe>",
    }


@pytest.fixture
def simple_html() -> str:
    """A page without any embedded pen payload."""
    return """
    <html>
    <head><title>Simple Page</title></head>
    <body>
        <h1>Hello World</h1>
        <script>var config = {"__other": "value"};</script>
    </body>
    </html>
    """
