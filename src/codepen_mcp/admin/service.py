"""Admin service layer for stats gathering."""

from __future__ import annotations

from typing import Any

from codepen_mcp import __version__
from codepen_mcp.metrics import get_metrics


def get_stats() -> dict[str, Any]:
    """Get server statistics and tool-call metrics.

    Returns:
        Dictionary with server version, uptime and tool-call metrics
    """
    stats = get_metrics().to_dict()
    stats["version"] = __version__
    return stats
