"""Pydantic models for the normalized contents of a pen page."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PenResource(BaseModel):
    """External script or stylesheet attached to a pen."""

    url: str = Field(default="", description="Resource URL")
    type: str = Field(default="js", description="Resource type, 'js' or 'css'")
    order: int | float = Field(default=0, description="Load order within the pen")


class PenAuthor(BaseModel):
    """Owner of a pen."""

    username: str = Field(description="CodePen username")
    name: str = Field(description="Display name, the username when unknown")
    url: str = Field(description="Profile URL")


class NormalizedPen(BaseModel):
    """Full source and metadata of a pen scraped from its page."""

    title: str = Field(default="Untitled", description="Pen title")
    description: str = Field(default="", description="Pen description")
    html: str = Field(default="", description="HTML source")
    css: str = Field(default="", description="CSS source")
    js: str = Field(default="", description="JavaScript source")
    tags: list[str] = Field(default_factory=list, description="Tags in page order")
    resources: list[PenResource] = Field(default_factory=list, description="External resources")
    html_pre_processor: str = Field(default="none", description="HTML preprocessor, e.g. 'pug'")
    css_pre_processor: str = Field(default="none", description="CSS preprocessor, e.g. 'scss'")
    js_pre_processor: str = Field(default="none", description="JS preprocessor, e.g. 'babel'")
    author: PenAuthor | None = Field(default=None, description="Pen owner")
    pen_url: str = Field(description="Canonical pen URL")
    hashid: str = Field(default="", description="Unique pen identifier")
