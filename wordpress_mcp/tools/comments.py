"""Comment tools for the WordPress REST API."""

from __future__ import annotations

from mcp.server.fastmcp.exceptions import ToolError

from ..client import request
from ..config import MAX_PER_PAGE
from ..models import CommentStatus, Order, RequestContext
from ..utils import (
    build_params,
    count_items,
    created_summary,
    format_result,
    tool_error,
)


def register_comment_tools(mcp):
    """Register comment-related tools with the MCP server."""

    @mcp.tool(
        name="wp_list_comments",
        annotations={
            "title": "List Comments",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_list_comments(
        post: int | None = None,
        status: CommentStatus | None = None,
        search: str | None = None,
        page: int = 1,
        per_page: int = 10,
        order: Order | None = None,
        context: RequestContext | None = None,
    ) -> str:
        """List comments, optionally for a single post.

        Statuses other than approved (hold, spam, trash) need an authenticated
        user who can moderate comments.

        Args:
            post: Only comments on this post ID.
            status: Filter by comment status.
            search: Limit results to comments matching this string.
            page: Page of results (default 1).
            per_page: Comments per page (default 10, max 100).
            order: Sort direction (asc or desc).
            context: Scope under which the request is made.

        Returns:
            str: Comment count followed by the comments as JSON.
        """
        params = {
            "post": post,
            "status": status,
            "search": search,
            "page": page,
            "per_page": min(per_page, MAX_PER_PAGE),
            "order": order,
            "context": context,
        }
        try:
            response = await request("GET", "comments", params)
        except Exception as e:
            raise tool_error("listing comments", e) from e

        summary = f"Found {count_items(response)} comments"
        if post is not None:
            summary += f" on post {post}"
        return format_result(summary, response)

    @mcp.tool(
        name="wp_get_comment",
        annotations={
            "title": "Get Comment",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_comment(comment_id: int, context: RequestContext | None = None) -> str:
        """Get a single comment by ID."""
        try:
            response = await request("GET", f"comments/{comment_id}", {"context": context})
        except Exception as e:
            raise tool_error(f"getting comment {comment_id}", e) from e

        return format_result(f"Comment {comment_id}", response)

    @mcp.tool(
        name="wp_create_comment",
        annotations={
            "title": "Create Comment",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_create_comment(
        post: int,
        content: str,
        author_name: str | None = None,
        author_email: str | None = None,
        parent: int | None = None,
    ) -> str:
        """Add a comment to a post.

        Args:
            post: ID of the post to comment on.
            content: Comment text.
            author_name: Display name (defaults to the authenticated user).
            author_email: Email address (defaults to the authenticated user).
            parent: ID of the comment being replied to.

        Returns:
            str: The created comment as JSON.
        """
        data = {
            "post": post,
            "content": content,
            "author_name": author_name,
            "author_email": author_email,
            "parent": parent,
        }
        try:
            response = await request("POST", "comments", data)
        except Exception as e:
            raise tool_error("creating comment", e) from e

        return format_result(created_summary("comment", response), response)

    @mcp.tool(
        name="wp_update_comment",
        annotations={
            "title": "Update Comment",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_update_comment(
        comment_id: int,
        content: str | None = None,
        status: CommentStatus | None = None,
    ) -> str:
        """Edit a comment or moderate it (approve, hold, spam, trash)."""
        data = build_params({"content": content, "status": status})
        if not data:
            raise ToolError(f"Error updating comment {comment_id}: no fields to update")

        try:
            response = await request("POST", f"comments/{comment_id}", data)
        except Exception as e:
            raise tool_error(f"updating comment {comment_id}", e) from e

        return format_result(f"Updated comment {comment_id}", response)

    @mcp.tool(
        name="wp_delete_comment",
        annotations={
            "title": "Delete Comment",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_delete_comment(comment_id: int, force: bool = False) -> str:
        """Move a comment to the trash, or delete it permanently with force."""
        try:
            response = await request("DELETE", f"comments/{comment_id}", {"force": force})
        except Exception as e:
            raise tool_error(f"deleting comment {comment_id}", e) from e

        action = "Deleted" if force else "Trashed"
        return format_result(f"{action} comment {comment_id}", response)
