"""Media library tools for the WordPress REST API."""

from __future__ import annotations

from mcp.server.fastmcp.exceptions import ToolError

from ..client import request
from ..config import MAX_PER_PAGE
from ..models import MediaType, RequestContext
from ..utils import build_params, count_items, format_result, tool_error


def register_media_tools(mcp):
    """Register media library tools with the MCP server."""

    @mcp.tool(
        name="wp_list_media",
        annotations={
            "title": "List Media",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_list_media(
        page: int = 1,
        per_page: int = 10,
        search: str | None = None,
        media_type: MediaType | None = None,
        mime_type: str | None = None,
        parent: int | None = None,
        context: RequestContext | None = None,
    ) -> str:
        """List items in the media library.

        Args:
            page: Page of results (default 1).
            per_page: Items per page (default 10, max 100).
            search: Limit results to items matching this string.
            media_type: Filter by media type (image, video, audio, ...).
            mime_type: Filter by exact MIME type (e.g. image/png).
            parent: Only attachments uploaded to this post ID.
            context: Scope under which the request is made.

        Returns:
            str: Item count followed by the media items as JSON.
        """
        params = {
            "page": page,
            "per_page": min(per_page, MAX_PER_PAGE),
            "search": search,
            "media_type": media_type,
            "mime_type": mime_type,
            "parent": parent,
            "context": context,
        }
        try:
            response = await request("GET", "media", params)
        except Exception as e:
            raise tool_error("listing media", e) from e

        return format_result(f"Found {count_items(response)} media items", response)

    @mcp.tool(
        name="wp_get_media",
        annotations={
            "title": "Get Media Item",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_media(media_id: int, context: RequestContext | None = None) -> str:
        """Get a single media item, including its source URL and sizes."""
        try:
            response = await request("GET", f"media/{media_id}", {"context": context})
        except Exception as e:
            raise tool_error(f"getting media item {media_id}", e) from e

        return format_result(f"Media item {media_id}", response)

    @mcp.tool(
        name="wp_update_media",
        annotations={
            "title": "Update Media Item",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_update_media(
        media_id: int,
        title: str | None = None,
        alt_text: str | None = None,
        caption: str | None = None,
        description: str | None = None,
        post: int | None = None,
    ) -> str:
        """Update a media item's metadata.

        Args:
            media_id: Attachment ID.
            title: New title.
            alt_text: Alternative text shown when the image is unavailable.
            caption: New caption.
            description: New description.
            post: Post ID to attach the item to.

        Returns:
            str: The updated media item as JSON.
        """
        data = build_params(
            {
                "title": title,
                "alt_text": alt_text,
                "caption": caption,
                "description": description,
                "post": post,
            }
        )
        if not data:
            raise ToolError(f"Error updating media item {media_id}: no fields to update")

        try:
            response = await request("POST", f"media/{media_id}", data)
        except Exception as e:
            raise tool_error(f"updating media item {media_id}", e) from e

        return format_result(f"Updated media item {media_id}", response)

    @mcp.tool(
        name="wp_delete_media",
        annotations={
            "title": "Delete Media Item",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_delete_media(media_id: int) -> str:
        """Permanently delete a media item and its files.

        Attachments do not support the trash, so deletion is always forced.
        """
        try:
            response = await request("DELETE", f"media/{media_id}", {"force": True})
        except Exception as e:
            raise tool_error(f"deleting media item {media_id}", e) from e

        return format_result(f"Deleted media item {media_id}", response)
