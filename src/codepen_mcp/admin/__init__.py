"""Admin HTTP endpoints for health checks and statistics.

The admin module follows a router -> service pattern:
- router.py: HTTP endpoint handlers
- service.py: Stats gathering
"""

from codepen_mcp.admin.router import api_stats, health_check, register_admin_routes
from codepen_mcp.admin.service import get_stats

__all__ = [
    "api_stats",
    "health_check",
    "register_admin_routes",
    "get_stats",
]
