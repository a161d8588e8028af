"""Main entry point for the CodePen MCP server."""

from __future__ import annotations

import logging
import os
import sys

from codepen_mcp.server import run_server


def main() -> None:
    """Main entry point."""
    # stdout carries the stdio transport, so logs go to stderr
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Parse command line arguments
    transport = "stdio"
    host = "127.0.0.1"
    port = 8000

    if len(sys.argv) > 1:
        transport = sys.argv[1]
    if len(sys.argv) > 2:
        host = sys.argv[2]
    if len(sys.argv) > 3:
        port = int(sys.argv[3])

    run_server(transport=transport, host=host, port=port)


if __name__ == "__main__":
    main()
