"""Base provider interface for outbound HTTP requests."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class FetchResult:
    """Result of a single HTTP GET.

    Non-2xx responses are returned as results, not raised, so callers can
    word the error for their own endpoint.
    """

    url: str
    status_code: int
    reason: str
    content: str
    content_type: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code < 300


class HttpProvider(ABC):
    """Abstract base class for HTTP providers."""

    @abstractmethod
    async def fetch(
        self,
        url: str,
        params: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
    ) -> FetchResult:
        """Issue a GET request.

        Args:
            url: The URL to request
            params: Optional query parameters
            headers: Optional request headers

        Returns:
            FetchResult with the status and decoded body text

        Raises:
            UpstreamError: If the request could not be completed at all
        """
        pass
