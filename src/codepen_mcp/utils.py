"""Extraction of the embedded pen payloads from CodePen page HTML.

A pen page ships its data in an inline script, roughly::

    {"__item":"{\\"title\\":\\"...\\",\\"html\\":\\"...\\"}","__profiled":{"username":"..."}}

``__item`` is a JSON document encoded as a JSON string, so it is captured with
an escape-aware pattern and decoded twice. ``__profiled`` is an inline object
describing the owner and is optional. None of this is a public contract, so
every step fails loudly with ExtractionError rather than guessing.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import ValidationError

from codepen_mcp.errors import ExtractionError
from codepen_mcp.models.pen import NormalizedPen, PenAuthor, PenResource
from codepen_mcp.urls import profile_url, split_pen_url

logger = logging.getLogger(__name__)

# Stops only at a quote that is not preceded by a backslash escape
ITEM_PATTERN = re.compile(r'"__item"\s*:\s*"((?:[^"\\]|\\.)*)"', re.DOTALL)

# Flat objects only: the match ends at the first closing brace
PROFILED_PATTERN = re.compile(r'"__profiled"\s*:\s*(\{[^}]+\})')

_ESCAPE_PATTERN = re.compile(r'\\([\\"nrt])')

_UNESCAPES = {
    "\\": "\\",
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

_TEXT_FIELDS = (
    "title",
    "description",
    "html",
    "css",
    "js",
    "html_pre_processor",
    "css_pre_processor",
    "js_pre_processor",
    "hashid",
)


def unescape_json_string(value: str) -> str:
    """Unescape the contents of a JSON string literal (without its quotes).

    Handles ``\\\\``, ``\\"``, ``\\n``, ``\\r`` and ``\\t`` in a single
    left-to-right pass, so an escaped backslash is consumed before it can
    start another escape. Other escapes such as ``\\uXXXX`` are left for the
    JSON parser.
    """
    return _ESCAPE_PATTERN.sub(lambda m: _UNESCAPES[m.group(1)], value)


def extract_item_json(html: str) -> str:
    """Return the decoded ``__item`` JSON text embedded in a pen page.

    Args:
        html: The pen page HTML

    Returns:
        The JSON document carried by the ``__item`` string value

    Raises:
        ExtractionError: If the page has no ``__item`` string
    """
    match = ITEM_PATTERN.search(html)
    if match is None:
        raise ExtractionError(
            "Could not find __item in pen page. CodePen may have changed their page structure."
        )
    return unescape_json_string(match.group(1))


def parse_item(html: str) -> dict[str, Any]:
    """Locate, decode and parse the ``__item`` payload into a dict.

    Raises:
        ExtractionError: If the payload is missing, is not valid JSON, or is
            not a JSON object
    """
    item_json = extract_item_json(html)
    try:
        # Tolerate raw control characters inside string values
        item = json.loads(item_json, strict=False)
    except json.JSONDecodeError as e:
        raise ExtractionError(f"Failed to parse pen __item JSON: {e}") from e

    if not isinstance(item, dict):
        raise ExtractionError("Pen __item is not an object")
    return item


def extract_profiled_author(html: str) -> PenAuthor | None:
    """Build the pen author from the optional ``__profiled`` payload.

    Never raises: a missing, malformed or incomplete payload yields None.
    """
    match = PROFILED_PATTERN.search(html)
    if match is None:
        return None

    try:
        profiled = json.loads(match.group(1))
    except json.JSONDecodeError as e:
        logger.warning(f"Ignoring unparseable __profiled payload: {e}")
        return None

    if not isinstance(profiled, dict):
        return None

    username = profiled.get("username")
    if not isinstance(username, str) or not username:
        return None

    name = profiled.get("name")
    try:
        return PenAuthor(
            username=username,
            name=username if name is None else name,
            url=profile_url(username),
        )
    except ValidationError as e:
        logger.warning(f"Ignoring invalid __profiled payload for {username}: {e}")
        return None


def author_from_url(pen_url: str) -> PenAuthor | None:
    """Synthesize an author from the username segment of a pen URL."""
    parts = split_pen_url(pen_url)
    if parts is None:
        return None
    username = parts[0]
    return PenAuthor(username=username, name=username, url=profile_url(username))


def _build_resources(raw: Any) -> list[PenResource]:
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ExtractionError("Pen __item resources is not a list")

    resources = []
    for entry in raw:
        if not isinstance(entry, dict):
            raise ExtractionError("Pen __item resource is not an object")

        order = entry.get("order")
        if isinstance(order, bool) or not isinstance(order, (int, float)):
            order = 0

        url = entry.get("url")
        resource_type = entry.get("resource_type")
        resources.append(
            PenResource(
                url="" if url is None else url,
                type="js" if resource_type is None else resource_type,
                order=order,
            )
        )
    return resources


def build_normalized_pen(
    item: dict[str, Any],
    pen_url: str,
    author: PenAuthor | None,
) -> NormalizedPen:
    """Assemble a NormalizedPen from a decoded ``__item`` payload.

    Absent (or null) fields take their model defaults; present fields of the
    wrong type are rejected.

    Args:
        item: The decoded ``__item`` object
        pen_url: Canonical pen URL
        author: Resolved author, if any

    Returns:
        The normalized pen record

    Raises:
        ExtractionError: If a present field has an unexpected shape
    """
    fields: dict[str, Any] = {
        key: item[key] for key in _TEXT_FIELDS if item.get(key) is not None
    }

    tags = item.get("tags")
    fields["tags"] = tags if isinstance(tags, list) else []

    try:
        fields["resources"] = _build_resources(item.get("resources"))
        return NormalizedPen(pen_url=pen_url, author=author, **fields)
    except ValidationError as e:
        raise ExtractionError(f"Unexpected pen __item field shape: {e}") from e


def extract_pen(html: str, pen_url: str) -> NormalizedPen:
    """Run the full extraction pipeline over a fetched pen page.

    Args:
        html: The pen page HTML
        pen_url: Canonical URL the page was fetched from

    Returns:
        The normalized pen record

    Raises:
        ExtractionError: If the ``__item`` payload is missing or malformed
    """
    item = parse_item(html)

    author = extract_profiled_author(html)
    if author is None:
        logger.debug(f"No __profiled author on {pen_url}, using URL username")
        author = author_from_url(pen_url)

    return build_normalized_pen(item, pen_url, author)
