"""Page tools for the WordPress REST API."""

from __future__ import annotations

from mcp.server.fastmcp.exceptions import ToolError

from ..client import request
from ..config import MAX_PER_PAGE
from ..models import Order, PostOrderBy, PostStatus, RequestContext
from ..utils import (
    build_params,
    count_items,
    created_summary,
    format_result,
    tool_error,
)


def register_page_tools(mcp):
    """Register page-related tools with the MCP server."""

    @mcp.tool(
        name="wp_list_pages",
        annotations={
            "title": "List Pages",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_list_pages(
        page: int = 1,
        per_page: int = 10,
        search: str | None = None,
        status: PostStatus | None = None,
        parent: int | None = None,
        order: Order | None = None,
        orderby: PostOrderBy | None = None,
        context: RequestContext | None = None,
    ) -> str:
        """List pages with optional filtering.

        Args:
            page: Page of results (default 1).
            per_page: Pages per page (default 10, max 100).
            search: Limit results to pages matching this string.
            status: Filter by status.
            parent: Only children of this page ID (0 for top-level pages).
            order: Sort direction (asc or desc).
            orderby: Sort field (menu_order, title, date, ...).
            context: Scope under which the request is made.

        Returns:
            str: Page count followed by the pages as JSON.
        """
        params = {
            "page": page,
            "per_page": min(per_page, MAX_PER_PAGE),
            "search": search,
            "status": status,
            "parent": parent,
            "order": order,
            "orderby": orderby,
            "context": context,
        }
        try:
            response = await request("GET", "pages", params)
        except Exception as e:
            raise tool_error("listing pages", e) from e

        return format_result(f"Found {count_items(response)} pages", response)

    @mcp.tool(
        name="wp_get_page",
        annotations={
            "title": "Get Page",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_page(page_id: int, context: RequestContext | None = None) -> str:
        """Get a single page by ID."""
        try:
            response = await request("GET", f"pages/{page_id}", {"context": context})
        except Exception as e:
            raise tool_error(f"getting page {page_id}", e) from e

        return format_result(f"Page {page_id}", response)

    @mcp.tool(
        name="wp_create_page",
        annotations={
            "title": "Create Page",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_create_page(
        title: str,
        content: str = "",
        status: PostStatus = "draft",
        excerpt: str | None = None,
        slug: str | None = None,
        parent: int | None = None,
        menu_order: int | None = None,
        template: str | None = None,
    ) -> str:
        """Create a new page. Pages are created as drafts unless a status is given.

        Args:
            title: Page title.
            content: Page content (HTML or block markup).
            status: Page status (default draft).
            excerpt: Page excerpt.
            slug: URL slug.
            parent: Parent page ID.
            menu_order: Position in menus and page listings.
            template: Theme template file to use.

        Returns:
            str: The created page as JSON.
        """
        data = {
            "title": title,
            "content": content,
            "status": status,
            "excerpt": excerpt,
            "slug": slug,
            "parent": parent,
            "menu_order": menu_order,
            "template": template,
        }
        try:
            response = await request("POST", "pages", data)
        except Exception as e:
            raise tool_error("creating page", e) from e

        return format_result(created_summary("page", response), response)

    @mcp.tool(
        name="wp_update_page",
        annotations={
            "title": "Update Page",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_update_page(
        page_id: int,
        title: str | None = None,
        content: str | None = None,
        status: PostStatus | None = None,
        excerpt: str | None = None,
        slug: str | None = None,
        parent: int | None = None,
        menu_order: int | None = None,
        template: str | None = None,
    ) -> str:
        """Update an existing page. Only the fields provided are changed.

        Args:
            page_id: Page ID.
            title: New title.
            content: New content.
            status: New status.
            excerpt: New excerpt.
            slug: New URL slug.
            parent: New parent page ID.
            menu_order: New menu position.
            template: New template file.

        Returns:
            str: The updated page as JSON.
        """
        data = build_params(
            {
                "title": title,
                "content": content,
                "status": status,
                "excerpt": excerpt,
                "slug": slug,
                "parent": parent,
                "menu_order": menu_order,
                "template": template,
            }
        )
        if not data:
            raise ToolError(f"Error updating page {page_id}: no fields to update")

        try:
            response = await request("POST", f"pages/{page_id}", data)
        except Exception as e:
            raise tool_error(f"updating page {page_id}", e) from e

        return format_result(f"Updated page {page_id}", response)

    @mcp.tool(
        name="wp_delete_page",
        annotations={
            "title": "Delete Page",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_delete_page(page_id: int, force: bool = False) -> str:
        """Move a page to the trash, or delete it permanently with force."""
        try:
            response = await request("DELETE", f"pages/{page_id}", {"force": force})
        except Exception as e:
            raise tool_error(f"deleting page {page_id}", e) from e

        action = "Deleted" if force else "Trashed"
        return format_result(f"{action} page {page_id}", response)
