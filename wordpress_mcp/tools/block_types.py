"""Block type tools for the WordPress REST API."""

from __future__ import annotations

from ..client import request
from ..models import RequestContext
from ..utils import count_items, format_result, path_segment, tool_error


def register_block_type_tools(mcp):
    """Register block-type tools with the MCP server."""

    @mcp.tool(
        name="wp_list_block_types",
        annotations={
            "title": "List Block Types",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_list_block_types(
        context: RequestContext | None = None,
        namespace: str | None = None,
    ) -> str:
        """List all available block types in WordPress, including core blocks and custom blocks.

        Args:
            context: Scope under which the request is made (view, embed or edit; defaults to view).
            namespace: Limit results to blocks of a specific namespace (e.g. "core", "custom").

        Returns:
            str: Block type count followed by the block types as JSON.
        """
        try:
            response = await request(
                "GET", "block-types", {"context": context, "namespace": namespace}
            )
        except Exception as e:
            raise tool_error("listing block types", e) from e

        summary = f"Found {count_items(response)} block types"
        if namespace:
            summary += f' in namespace "{namespace}"'
        return format_result(summary, response)

    @mcp.tool(
        name="wp_get_block_type",
        annotations={
            "title": "Get Block Type",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_block_type(
        name: str,
        context: RequestContext | None = None,
    ) -> str:
        """Get details about a specific block type.

        Args:
            name: The block type name (e.g. "core/paragraph", "core/heading").
            context: Scope under which the request is made (view, embed or edit; defaults to view).

        Returns:
            str: The block type definition as JSON.
        """
        # "namespace/name" maps onto two route segments
        endpoint = f"block-types/{path_segment(name, keep_slash=True)}"
        try:
            response = await request("GET", endpoint, {"context": context})
        except Exception as e:
            raise tool_error(f'getting block type "{name}"', e) from e

        return format_result(f'Block type "{name}" details', response)
