"""Pydantic data models for CodePen data and tool responses.

This module defines the data structures used throughout the server:
- oEmbed metadata as returned by CodePen (EmbedMetadata)
- The normalized scrape of a pen page (NormalizedPen, PenResource, PenAuthor)
- Curated tool payloads (PenMetadataResponse, PenEmbedResponse)

All models use Pydantic v2 for validation and serialization.
"""

from codepen_mcp.models.oembed import (
    EmbedMetadata,
    PenEmbedResponse,
    PenMetadataResponse,
)
from codepen_mcp.models.pen import NormalizedPen, PenAuthor, PenResource

__all__ = [
    # oEmbed models
    "EmbedMetadata",
    "PenMetadataResponse",
    "PenEmbedResponse",
    # Pen page models
    "NormalizedPen",
    "PenAuthor",
    "PenResource",
]
