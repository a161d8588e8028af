"""Provider initialization for the CodePen MCP server."""

from codepen_mcp.providers import HttpProvider, RequestsProvider

# Stateless; shared by every tool invocation
default_provider: HttpProvider = RequestsProvider()
