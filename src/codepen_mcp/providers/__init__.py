"""HTTP providers used to reach CodePen."""

from codepen_mcp.providers.base import FetchResult, HttpProvider
from codepen_mcp.providers.requests_provider import DEFAULT_USER_AGENT, RequestsProvider

__all__ = ["DEFAULT_USER_AGENT", "FetchResult", "HttpProvider", "RequestsProvider"]
