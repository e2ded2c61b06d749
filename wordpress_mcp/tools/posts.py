"""Post tools for the WordPress REST API."""

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


def register_post_tools(mcp):
    """Register post-related tools with the MCP server."""

    @mcp.tool(
        name="wp_list_posts",
        annotations={
            "title": "List Posts",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_list_posts(
        page: int = 1,
        per_page: int = 10,
        search: str | None = None,
        status: PostStatus | None = None,
        categories: list[int] | None = None,
        tags: list[int] | None = None,
        author: int | None = None,
        order: Order | None = None,
        orderby: PostOrderBy | None = None,
        context: RequestContext | None = None,
    ) -> str:
        """List posts with optional filtering.

        Non-public statuses (draft, private, ...) need an authenticated user.

        Args:
            page: Page of results (default 1).
            per_page: Posts per page (default 10, max 100).
            search: Limit results to posts matching this string.
            status: Filter by post status.
            categories: Only posts assigned to these category IDs.
            tags: Only posts assigned to these tag IDs.
            author: Only posts by this user ID.
            order: Sort direction (asc or desc).
            orderby: Sort field (date, title, id, ...).
            context: Scope under which the request is made.

        Returns:
            str: Post count followed by the posts as JSON.
        """
        params = {
            "page": page,
            "per_page": min(per_page, MAX_PER_PAGE),
            "search": search,
            "status": status,
            "categories": categories,
            "tags": tags,
            "author": author,
            "order": order,
            "orderby": orderby,
            "context": context,
        }
        try:
            response = await request("GET", "posts", params)
        except Exception as e:
            raise tool_error("listing posts", e) from e

        return format_result(f"Found {count_items(response)} posts", response)

    @mcp.tool(
        name="wp_get_post",
        annotations={
            "title": "Get Post",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_post(post_id: int, context: RequestContext | None = None) -> str:
        """Get a single post by ID.

        Args:
            post_id: Post ID.
            context: Scope under which the request is made.

        Returns:
            str: The post as JSON.
        """
        try:
            response = await request("GET", f"posts/{post_id}", {"context": context})
        except Exception as e:
            raise tool_error(f"getting post {post_id}", e) from e

        return format_result(f"Post {post_id}", response)

    @mcp.tool(
        name="wp_create_post",
        annotations={
            "title": "Create Post",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_create_post(
        title: str,
        content: str = "",
        status: PostStatus = "draft",
        excerpt: str | None = None,
        categories: list[int] | None = None,
        tags: list[int] | None = None,
        slug: str | None = None,
        author: int | None = None,
        date: str | None = None,
        featured_media: int | None = None,
    ) -> str:
        """Create a new post. Posts are created as drafts unless a status is given.

        Args:
            title: Post title.
            content: Post content (HTML or block markup).
            status: Post status (default draft).
            excerpt: Post excerpt.
            categories: Category IDs to assign.
            tags: Tag IDs to assign.
            slug: URL slug.
            author: Author user ID.
            date: Publish date in the site's timezone (ISO 8601).
            featured_media: Attachment ID of the featured image.

        Returns:
            str: The created post as JSON.
        """
        data = {
            "title": title,
            "content": content,
            "status": status,
            "excerpt": excerpt,
            "categories": categories,
            "tags": tags,
            "slug": slug,
            "author": author,
            "date": date,
            "featured_media": featured_media,
        }
        try:
            response = await request("POST", "posts", data)
        except Exception as e:
            raise tool_error("creating post", e) from e

        return format_result(created_summary("post", response), response)

    @mcp.tool(
        name="wp_update_post",
        annotations={
            "title": "Update Post",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_update_post(
        post_id: int,
        title: str | None = None,
        content: str | None = None,
        status: PostStatus | None = None,
        excerpt: str | None = None,
        categories: list[int] | None = None,
        tags: list[int] | None = None,
        slug: str | None = None,
        author: int | None = None,
        date: str | None = None,
        featured_media: int | None = None,
    ) -> str:
        """Update an existing post. Only the fields provided are changed.

        Args:
            post_id: Post ID.
            title: New title.
            content: New content.
            status: New status.
            excerpt: New excerpt.
            categories: Replacement list of category IDs.
            tags: Replacement list of tag IDs.
            slug: New URL slug.
            author: New author user ID.
            date: New publish date (ISO 8601).
            featured_media: Attachment ID of the featured image.

        Returns:
            str: The updated post as JSON.
        """
        data = build_params(
            {
                "title": title,
                "content": content,
                "status": status,
                "excerpt": excerpt,
                "categories": categories,
                "tags": tags,
                "slug": slug,
                "author": author,
                "date": date,
                "featured_media": featured_media,
            }
        )
        if not data:
            raise ToolError(f"Error updating post {post_id}: no fields to update")

        try:
            response = await request("POST", f"posts/{post_id}", data)
        except Exception as e:
            raise tool_error(f"updating post {post_id}", e) from e

        return format_result(f"Updated post {post_id}", response)

    @mcp.tool(
        name="wp_delete_post",
        annotations={
            "title": "Delete Post",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_delete_post(post_id: int, force: bool = False) -> str:
        """Move a post to the trash, or delete it permanently with force.

        Args:
            post_id: Post ID.
            force: Bypass the trash and delete permanently (default false).

        Returns:
            str: The trashed or deleted post as JSON.
        """
        try:
            response = await request("DELETE", f"posts/{post_id}", {"force": force})
        except Exception as e:
            raise tool_error(f"deleting post {post_id}", e) from e

        action = "Deleted" if force else "Trashed"
        return format_result(f"{action} post {post_id}", response)
