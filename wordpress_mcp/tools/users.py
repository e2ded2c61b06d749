"""User tools for the WordPress REST API."""

from __future__ import annotations

from ..client import request
from ..config import MAX_PER_PAGE
from ..models import RequestContext
from ..utils import count_items, format_result, tool_error


def register_user_tools(mcp):
    """Register user-related tools with the MCP server."""

    @mcp.tool(
        name="wp_list_users",
        annotations={
            "title": "List Users",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_list_users(
        page: int = 1,
        per_page: int = 10,
        search: str | None = None,
        roles: list[str] | None = None,
        context: RequestContext | None = None,
    ) -> str:
        """List users.

        Unauthenticated requests only see users who have published posts.

        Args:
            page: Page of results (default 1).
            per_page: Users per page (default 10, max 100).
            search: Limit results to users matching this string.
            roles: Only users with at least one of these roles (e.g. administrator, editor).
            context: Scope under which the request is made.

        Returns:
            str: User count followed by the users as JSON.
        """
        params = {
            "page": page,
            "per_page": min(per_page, MAX_PER_PAGE),
            "search": search,
            "roles": roles,
            "context": context,
        }
        try:
            response = await request("GET", "users", params)
        except Exception as e:
            raise tool_error("listing users", e) from e

        return format_result(f"Found {count_items(response)} users", response)

    @mcp.tool(
        name="wp_get_user",
        annotations={
            "title": "Get User",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_user(user_id: int, context: RequestContext | None = None) -> str:
        """Get a single user by ID."""
        try:
            response = await request("GET", f"users/{user_id}", {"context": context})
        except Exception as e:
            raise tool_error(f"getting user {user_id}", e) from e

        return format_result(f"User {user_id}", response)

    @mcp.tool(
        name="wp_get_current_user",
        annotations={
            "title": "Get Current User",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_current_user(context: RequestContext | None = None) -> str:
        """Get the user the server is authenticated as.

        Useful to check which account and capabilities the configured
        application password grants.
        """
        try:
            response = await request("GET", "users/me", {"context": context})
        except Exception as e:
            raise tool_error("getting current user", e) from e

        return format_result("Current user", response)
