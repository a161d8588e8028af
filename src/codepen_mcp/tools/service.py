"""Business logic for the CodePen tools."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from codepen_mcp.core.providers import default_provider
from codepen_mcp.errors import UpstreamError
from codepen_mcp.models import EmbedMetadata, NormalizedPen
from codepen_mcp.urls import CODEPEN_BASE_URL, normalize_pen_url
from codepen_mcp.utils import extract_pen

logger = logging.getLogger(__name__)

OEMBED_URL = f"{CODEPEN_BASE_URL}/api/oembed"


async def fetch_pen_metadata(pen_url: str, height: int | None = None) -> EmbedMetadata:
    """Fetch pen metadata from the CodePen oEmbed API.

    Args:
        pen_url: Canonical pen URL
        height: Optional embed height in pixels

    Returns:
        The oEmbed body, unchanged

    Raises:
        UpstreamError: On a non-2xx status, a non-JSON body, or ``success: false``
    """
    params = {"format": "json", "url": pen_url}
    if height is not None:
        params["height"] = str(height)

    result = await default_provider.fetch(
        OEMBED_URL,
        params=params,
        headers={"Accept": "application/json"},
    )

    if not result.ok:
        raise UpstreamError(
            f"oEmbed request failed ({result.status_code}): {result.content or result.reason}"
        )

    try:
        metadata = EmbedMetadata.model_validate_json(result.content)
    except ValidationError as e:
        raise UpstreamError(f"oEmbed returned an unexpected body: {e}") from e

    if metadata.success is False:
        raise UpstreamError("CodePen oEmbed returned success: false")

    logger.debug(f"oEmbed metadata for {pen_url}: {metadata.title!r}")
    return metadata


async def fetch_pen(pen_ref: str) -> NormalizedPen:
    """Fetch a pen page and extract its full source (best effort).

    Args:
        pen_ref: Pen URL or slug as supplied by the user

    Returns:
        The normalized pen record

    Raises:
        InvalidReference: If ``pen_ref`` is not a pen URL or slug
        UpstreamError: If the page request does not return 2xx
        ExtractionError: If the page does not carry the expected payload
    """
    pen_url = normalize_pen_url(pen_ref)

    result = await default_provider.fetch(
        pen_url,
        headers={"Accept": "text/html"},
    )
    if not result.ok:
        raise UpstreamError(f"Failed to fetch pen page ({result.status_code}): {result.reason}")

    logger.debug(f"Extracting pen from {pen_url} ({len(result.content)} bytes)")
    return extract_pen(result.content, pen_url)
