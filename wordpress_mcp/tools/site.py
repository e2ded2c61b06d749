"""Site-level tools: REST route discovery and general settings."""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp.exceptions import ToolError

from ..client import request
from ..models import CommentDefaultStatus
from ..utils import build_params, format_result, tool_error


def summarize_routes(index: Any) -> dict[str, Any]:
    """Reduce a namespace index to its routes and the methods each accepts."""
    if not isinstance(index, dict):
        return {"namespace": None, "routes": {}}

    routes: dict[str, list[str]] = {}
    for path, route in sorted((index.get("routes") or {}).items()):
        methods = route.get("methods", []) if isinstance(route, dict) else []
        routes[path] = sorted(set(methods))
    return {"namespace": index.get("namespace"), "routes": routes}


def register_site_tools(mcp):
    """Register site-level tools with the MCP server."""

    @mcp.tool(
        name="wp_list_routes",
        annotations={
            "title": "List REST Routes",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_list_routes() -> str:
        """List the REST routes exposed under the configured API base and their HTTP methods.

        Shows which endpoints (custom post types, plugin routes, ...) the site
        offers beyond the core ones.
        """
        try:
            response = await request("GET", "")
        except Exception as e:
            raise tool_error("listing routes", e) from e

        summary = summarize_routes(response)
        return format_result(f"Found {len(summary['routes'])} routes", summary)

    @mcp.tool(
        name="wp_get_settings",
        annotations={
            "title": "Get Site Settings",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_settings() -> str:
        """Get the site's general settings (title, tagline, URL, timezone, ...).

        Requires the manage_options capability.
        """
        try:
            response = await request("GET", "settings")
        except Exception as e:
            raise tool_error("getting settings", e) from e

        return format_result("Site settings", response)

    @mcp.tool(
        name="wp_update_settings",
        annotations={
            "title": "Update Site Settings",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_update_settings(
        title: str | None = None,
        description: str | None = None,
        timezone: str | None = None,
        date_format: str | None = None,
        time_format: str | None = None,
        posts_per_page: int | None = None,
        default_comment_status: CommentDefaultStatus | None = None,
    ) -> str:
        """Update general settings. Only the fields provided are changed.

        Args:
            title: Site title.
            description: Site tagline.
            timezone: City-based timezone, e.g. "Europe/Lisbon".
            date_format: PHP date format, e.g. "F j, Y".
            time_format: PHP time format, e.g. "g:i a".
            posts_per_page: Blog pages show at most this many posts.
            default_comment_status: Whether new posts accept comments (open or closed).

        Returns:
            str: The updated settings as JSON.
        """
        data = build_params(
            {
                "title": title,
                "description": description,
                "timezone": timezone,
                "date_format": date_format,
                "time_format": time_format,
                "posts_per_page": posts_per_page,
                "default_comment_status": default_comment_status,
            }
        )
        if not data:
            raise ToolError("Error updating settings: no fields to update")

        try:
            response = await request("POST", "settings", data)
        except Exception as e:
            raise tool_error("updating settings", e) from e

        return format_result("Updated site settings", response)
