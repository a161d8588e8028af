"""HTTP provider backed by the requests library."""

from __future__ import annotations

import asyncio
import logging

import requests

from codepen_mcp.errors import UpstreamError
from codepen_mcp.providers.base import FetchResult, HttpProvider

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "CodePen-MCP/1.0 (ingest tool)"


class RequestsProvider(HttpProvider):
    """Single-attempt GET requests run in the event loop's executor.

    Each call goes through ``requests.get`` without a shared session, so no
    cookies or connections carry over between tool invocations.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            user_agent: User-Agent sent when the caller does not set one
            timeout: Request timeout in seconds (default: None, no timeout)
        """
        self.user_agent = user_agent
        self.timeout = timeout

    async def fetch(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> FetchResult:
        """Issue a GET request and return the response without raising on status.

        Args:
            url: The URL to request
            params: Optional query parameters
            headers: Optional request headers

        Returns:
            FetchResult with the status, reason and body text

        Raises:
            UpstreamError: If requests fails before a response is received
        """
        request_headers = dict(headers or {})
        request_headers.setdefault("User-Agent", self.user_agent)

        logger.debug(f"GET {url} params={params}")

        try:
            # Run requests in thread pool to avoid blocking
            loop = asyncio.get_event_loop()
            response = await loop.run_in_executor(
                None,
                lambda: requests.get(
                    url, params=params, headers=request_headers, timeout=self.timeout
                ),
            )
        except requests.RequestException as e:
            raise UpstreamError(f"Request to {url} failed: {e}") from e

        logger.debug(f"GET {response.url} -> {response.status_code}")

        return FetchResult(
            url=response.url,
            status_code=response.status_code,
            reason=response.reason or "",
            content=response.text,
            content_type=response.headers.get("Content-Type"),
            metadata={
                "elapsed_ms": response.elapsed.total_seconds() * 1000,
                "encoding": response.encoding,
            },
        )
