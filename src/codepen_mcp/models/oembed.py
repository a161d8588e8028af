"""Pydantic models for the CodePen oEmbed endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class EmbedMetadata(BaseModel):
    """oEmbed response body, passed through as CodePen returns it."""

    model_config = ConfigDict(extra="allow")

    success: Any = Field(default=None, description="Success flag reported by CodePen")
    type: Any = Field(default=None, description="oEmbed resource type")
    version: Any = Field(default=None, description="oEmbed version")
    provider_name: Any = Field(default=None, description="Provider name")
    provider_url: Any = Field(default=None, description="Provider URL")
    title: Any = Field(default=None, description="Pen title")
    author_name: Any = Field(default=None, description="Display name of the pen author")
    author_url: Any = Field(default=None, description="Profile URL of the pen author")
    height: Any = Field(default=None, description="Embed height")
    width: Any = Field(default=None, description="Embed width")
    thumbnail_url: Any = Field(default=None, description="Thumbnail image URL")
    thumbnail_width: Any = Field(default=None, description="Thumbnail width")
    thumbnail_height: Any = Field(default=None, description="Thumbnail height")
    html: Any = Field(default=None, description="Embeddable HTML fragment")


class PenMetadataResponse(BaseModel):
    """Payload of the get_pen_metadata tool."""

    pen_url: str = Field(description="Canonical pen URL")
    title: Any = Field(description="Pen title")
    author_name: Any = Field(description="Display name of the pen author")
    author_url: Any = Field(description="Profile URL of the pen author")
    thumbnail_url: Any = Field(default=None, description="Thumbnail image URL")
    height: Any = Field(description="Embed height")
    width: Any = Field(description="Embed width")
    embed_html: Any = Field(description="Embeddable iframe HTML")

    @classmethod
    def from_metadata(cls, pen_url: str, metadata: EmbedMetadata) -> PenMetadataResponse:
        return cls(
            pen_url=pen_url,
            title=metadata.title,
            author_name=metadata.author_name,
            author_url=metadata.author_url,
            thumbnail_url=metadata.thumbnail_url,
            height=metadata.height,
            width=metadata.width,
            embed_html=metadata.html,
        )


class PenEmbedResponse(BaseModel):
    """Payload of the get_pen_embed_html tool."""

    pen_url: str = Field(description="Canonical pen URL")
    title: Any = Field(description="Pen title")
    embed_html: Any = Field(description="Embeddable iframe HTML")
