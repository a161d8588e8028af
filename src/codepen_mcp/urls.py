"""Normalization of user-supplied pen references."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from codepen_mcp.errors import InvalidReference

CODEPEN_HOST = "codepen.io"
CODEPEN_BASE_URL = f"https://{CODEPEN_HOST}"

_URL_PATH_PATTERN = re.compile(r"^/([^/]+)/pen/([^/]+)")
_SLUG_PATTERN = re.compile(r"^([^/]+)/pen/([^/]+)")


def canonical_pen_url(username: str, slug: str) -> str:
    """Render the canonical pen URL for a username and slug."""
    return f"{CODEPEN_BASE_URL}/{username}/pen/{slug}"


def profile_url(username: str) -> str:
    """Render the profile URL of a CodePen user."""
    return f"{CODEPEN_BASE_URL}/{username}"


def _from_url(value: str) -> str | None:
    try:
        parsed = urlparse(value)
    except ValueError:
        return None

    if parsed.scheme != "https" or parsed.netloc != CODEPEN_HOST:
        return None

    path = parsed.path
    if path.endswith("/"):
        path = path[:-1]

    match = _URL_PATH_PATTERN.match(path)
    if match:
        return canonical_pen_url(match.group(1), match.group(2))
    return None


def _from_slug(value: str) -> str | None:
    if "/pen/" not in value:
        return None

    if value.startswith("/"):
        value = value[1:]
    if value.endswith("/"):
        value = value[:-1]

    match = _SLUG_PATTERN.match(value)
    if match:
        return canonical_pen_url(match.group(1), match.group(2))
    return None


def normalize_pen_url(value: str) -> str:
    """Convert a pen URL or slug into the canonical pen URL.

    Accepted inputs, tried in order:

    - ``https://codepen.io/<username>/pen/<slug>[/...]``
    - ``<username>/pen/<slug>`` with an optional leading or trailing slash

    Args:
        value: The pen reference supplied by the user

    Returns:
        The canonical URL ``https://codepen.io/<username>/pen/<slug>``

    Raises:
        InvalidReference: If the input matches neither form
    """
    trimmed = value.strip()

    url = _from_url(trimmed) or _from_slug(trimmed)
    if url is None:
        raise InvalidReference(
            f"Invalid CodePen URL or slug: {value}. Expected format: "
            f"{CODEPEN_BASE_URL}/username/pen/slug or username/pen/slug"
        )
    return url


def split_pen_url(url: str) -> tuple[str, str] | None:
    """Return the ``(username, slug)`` pair of a canonical pen URL, if any."""
    path = urlparse(url).path
    match = _URL_PATH_PATTERN.match(path)
    if match is None:
        return None
    return match.group(1), match.group(2)
