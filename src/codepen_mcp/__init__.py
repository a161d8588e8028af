"""MCP server exposing public CodePen pen data."""

__version__ = "1.0.0"
