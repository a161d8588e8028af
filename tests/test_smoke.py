"""Tests for the live smoke check entry point."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, Mock, patch

import pytest
from conftest import PEN_URL, make_fetch_result

from codepen_mcp.errors import InvalidReference
from codepen_mcp.smoke import main, smoke_check
from codepen_mcp.tools import OEMBED_URL


@pytest.fixture
def provider(pen_page_html: str, oembed_body: dict[str, Any]) -> Mock:
    """Mock provider serving the oEmbed body and the pen page."""
    responses = {
        OEMBED_URL: make_fetch_result(json.dumps(oembed_body), url=OEMBED_URL),
        PEN_URL: make_fetch_result(pen_page_html),
    }
    mock = Mock()
    mock.fetch = AsyncMock(side_effect=lambda url, **kwargs: responses[url])
    return mock


class TestSmokeCheck:
    """Tests for smoke_check."""

    @pytest.mark.asyncio
    async def test_summary(self, provider: Mock, pen_item: dict[str, Any]) -> None:
        with patch("codepen_mcp.tools.service.default_provider", provider):
            summary = await smoke_check("johndjameson/pen/DwxMqa")

        assert summary["pen_url"] == PEN_URL
        assert summary["metadata"] == {
            "title": "Responsive Sidenotes V2",
            "author_name": "John D. Jameson",
        }
        assert summary["pen"]["tags"] == pen_item["tags"]
        assert summary["pen"]["js_length"] == len(pen_item["js"])
        assert summary["pen"]["resources"] == 1
        assert summary["pen"]["css_pre_processor"] == "scss"
        assert summary["pen"]["author"] == "johndjameson"
        assert provider.fetch.call_count == 2

    @pytest.mark.asyncio
    async def test_invalid_reference(self, provider: Mock) -> None:
        with patch("codepen_mcp.tools.service.default_provider", provider):
            with pytest.raises(InvalidReference):
                await smoke_check("nope")

        provider.fetch.assert_not_called()


class TestSmokeMain:
    """Tests for the smoke command line."""

    def test_prints_summary(self, provider: Mock, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("codepen_mcp.tools.service.default_provider", provider):
            with patch("sys.argv", ["codepen-mcp-smoke", PEN_URL]):
                main()

        out = capsys.readouterr().out
        assert "title: Responsive Sidenotes V2" in out
        assert out.rstrip().endswith(f"OK {PEN_URL}")

    def test_exits_nonzero_on_failure(self, provider: Mock) -> None:
        with patch("codepen_mcp.tools.service.default_provider", provider):
            with patch("sys.argv", ["codepen-mcp-smoke", "not-a-valid-url"]):
                with pytest.raises(SystemExit) as exc_info:
                    main()

        assert exc_info.value.code == 1
