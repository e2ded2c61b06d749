"""Category and tag tools for the WordPress REST API."""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp.exceptions import ToolError

from ..client import request
from ..config import MAX_PER_PAGE
from ..models import Order, RequestContext
from ..utils import (
    build_params,
    count_items,
    created_summary,
    format_result,
    tool_error,
)


async def _list_terms(endpoint: str, plural: str, params: dict[str, Any]) -> str:
    if params.get("per_page"):
        params["per_page"] = min(params["per_page"], MAX_PER_PAGE)
    try:
        response = await request("GET", endpoint, params)
    except Exception as e:
        raise tool_error(f"listing {plural}", e) from e
    return format_result(f"Found {count_items(response)} {plural}", response)


async def _get_term(endpoint: str, singular: str, term_id: int, context: str | None) -> str:
    try:
        response = await request("GET", f"{endpoint}/{term_id}", {"context": context})
    except Exception as e:
        raise tool_error(f"getting {singular} {term_id}", e) from e
    return format_result(f"{singular.capitalize()} {term_id}", response)


async def _create_term(endpoint: str, singular: str, data: dict[str, Any]) -> str:
    try:
        response = await request("POST", endpoint, data)
    except Exception as e:
        raise tool_error(f"creating {singular}", e) from e
    return format_result(created_summary(singular, response), response)


async def _update_term(endpoint: str, singular: str, term_id: int, data: dict[str, Any]) -> str:
    data = build_params(data)
    if not data:
        raise ToolError(f"Error updating {singular} {term_id}: no fields to update")
    try:
        response = await request("POST", f"{endpoint}/{term_id}", data)
    except Exception as e:
        raise tool_error(f"updating {singular} {term_id}", e) from e
    return format_result(f"Updated {singular} {term_id}", response)


async def _delete_term(endpoint: str, singular: str, term_id: int) -> str:
    # Terms do not support trashing
    try:
        response = await request("DELETE", f"{endpoint}/{term_id}", {"force": True})
    except Exception as e:
        raise tool_error(f"deleting {singular} {term_id}", e) from e
    return format_result(f"Deleted {singular} {term_id}", response)


def register_term_tools(mcp):
    """Register category and tag tools with the MCP server."""

    # -- Categories ---------------------------------------------------------

    @mcp.tool(
        name="wp_list_categories",
        annotations={
            "title": "List Categories",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_list_categories(
        page: int = 1,
        per_page: int = 10,
        search: str | None = None,
        parent: int | None = None,
        post: int | None = None,
        hide_empty: bool | None = None,
        order: Order | None = None,
        context: RequestContext | None = None,
    ) -> str:
        """List post categories.

        Args:
            page: Page of results (default 1).
            per_page: Categories per page (default 10, max 100).
            search: Limit results to categories matching this string.
            parent: Only children of this category ID.
            post: Only categories assigned to this post ID.
            hide_empty: Skip categories with no posts.
            order: Sort direction (asc or desc).
            context: Scope under which the request is made.

        Returns:
            str: Category count followed by the categories as JSON.
        """
        return await _list_terms(
            "categories",
            "categories",
            {
                "page": page,
                "per_page": per_page,
                "search": search,
                "parent": parent,
                "post": post,
                "hide_empty": hide_empty,
                "order": order,
                "context": context,
            },
        )

    @mcp.tool(
        name="wp_get_category",
        annotations={
            "title": "Get Category",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_category(category_id: int, context: RequestContext | None = None) -> str:
        """Get a single category by ID."""
        return await _get_term("categories", "category", category_id, context)

    @mcp.tool(
        name="wp_create_category",
        annotations={
            "title": "Create Category",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_create_category(
        name: str,
        description: str | None = None,
        slug: str | None = None,
        parent: int | None = None,
    ) -> str:
        """Create a category.

        Args:
            name: Category name.
            description: Category description.
            slug: URL slug (generated from the name when omitted).
            parent: Parent category ID.

        Returns:
            str: The created category as JSON.
        """
        return await _create_term(
            "categories",
            "category",
            {"name": name, "description": description, "slug": slug, "parent": parent},
        )

    @mcp.tool(
        name="wp_update_category",
        annotations={
            "title": "Update Category",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_update_category(
        category_id: int,
        name: str | None = None,
        description: str | None = None,
        slug: str | None = None,
        parent: int | None = None,
    ) -> str:
        """Update a category. Only the fields provided are changed."""
        return await _update_term(
            "categories",
            "category",
            category_id,
            {"name": name, "description": description, "slug": slug, "parent": parent},
        )

    @mcp.tool(
        name="wp_delete_category",
        annotations={
            "title": "Delete Category",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_delete_category(category_id: int) -> str:
        """Permanently delete a category. Its posts fall back to the default category."""
        return await _delete_term("categories", "category", category_id)

    # -- Tags ---------------------------------------------------------------

    @mcp.tool(
        name="wp_list_tags",
        annotations={
            "title": "List Tags",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_list_tags(
        page: int = 1,
        per_page: int = 10,
        search: str | None = None,
        post: int | None = None,
        hide_empty: bool | None = None,
        order: Order | None = None,
        context: RequestContext | None = None,
    ) -> str:
        """List post tags.

        Args:
            page: Page of results (default 1).
            per_page: Tags per page (default 10, max 100).
            search: Limit results to tags matching this string.
            post: Only tags assigned to this post ID.
            hide_empty: Skip tags with no posts.
            order: Sort direction (asc or desc).
            context: Scope under which the request is made.

        Returns:
            str: Tag count followed by the tags as JSON.
        """
        return await _list_terms(
            "tags",
            "tags",
            {
                "page": page,
                "per_page": per_page,
                "search": search,
                "post": post,
                "hide_empty": hide_empty,
                "order": order,
                "context": context,
            },
        )

    @mcp.tool(
        name="wp_get_tag",
        annotations={
            "title": "Get Tag",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_tag(tag_id: int, context: RequestContext | None = None) -> str:
        """Get a single tag by ID."""
        return await _get_term("tags", "tag", tag_id, context)

    @mcp.tool(
        name="wp_create_tag",
        annotations={
            "title": "Create Tag",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_create_tag(
        name: str,
        description: str | None = None,
        slug: str | None = None,
    ) -> str:
        """Create a tag."""
        return await _create_term(
            "tags", "tag", {"name": name, "description": description, "slug": slug}
        )

    @mcp.tool(
        name="wp_update_tag",
        annotations={
            "title": "Update Tag",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_update_tag(
        tag_id: int,
        name: str | None = None,
        description: str | None = None,
        slug: str | None = None,
    ) -> str:
        """Update a tag. Only the fields provided are changed."""
        return await _update_term(
            "tags", "tag", tag_id, {"name": name, "description": description, "slug": slug}
        )

    @mcp.tool(
        name="wp_delete_tag",
        annotations={
            "title": "Delete Tag",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_delete_tag(tag_id: int) -> str:
        """Permanently delete a tag."""
        return await _delete_term("tags", "tag", tag_id)
