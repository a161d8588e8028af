"""Shared provider instance used by the tool services."""

from codepen_mcp.core.providers import default_provider

__all__ = ["default_provider"]
