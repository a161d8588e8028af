"""Exceptions raised by the CodePen fetchers and extractor."""

from __future__ import annotations


class PenError(Exception):
    """Base class for errors that are reported back to the calling agent."""


class InvalidReference(PenError):
    """The pen URL or slug supplied by the user is not recognized."""


class UpstreamError(PenError):
    """CodePen answered with a non-2xx status or reported a failure."""


class ExtractionError(PenError):
    """The pen page did not contain the expected embedded payload."""
