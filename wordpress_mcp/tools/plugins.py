"""Plugin tools: installed plugins on the site and the WordPress.org directory."""

from __future__ import annotations

from typing import Annotated

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from ..client import request, search_plugin_repository
from ..config import MAX_PER_PAGE
from ..models import PluginStatus, PluginSummary, RequestContext
from ..utils import count_items, format_result, path_segment, tool_error


def plugin_endpoint(plugin: str) -> str:
    """Endpoint for an installed plugin given as `dir/file` or `dir/file.php`."""
    plugin = plugin.strip().strip("/")
    if plugin.endswith(".php"):
        plugin = plugin[: -len(".php")]
    return f"plugins/{path_segment(plugin, keep_slash=True)}"


def register_plugin_tools(mcp):
    """Register plugin tools with the MCP server."""

    @mcp.tool(
        name="wp_list_plugins",
        annotations={
            "title": "List Installed Plugins",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_list_plugins(
        status: PluginStatus | None = None,
        search: str | None = None,
        context: RequestContext | None = None,
    ) -> str:
        """List plugins installed on the site. Requires the activate_plugins capability.

        Args:
            status: Only active or inactive plugins.
            search: Limit results to plugins matching this string.
            context: Scope under which the request is made.

        Returns:
            str: Plugin count followed by the plugins as JSON.
        """
        try:
            response = await request(
                "GET", "plugins", {"status": status, "search": search, "context": context}
            )
        except Exception as e:
            raise tool_error("listing plugins", e) from e

        summary = f"Found {count_items(response)} plugins"
        if status:
            summary += f" ({status})"
        return format_result(summary, response)

    @mcp.tool(
        name="wp_get_plugin",
        annotations={
            "title": "Get Installed Plugin",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_get_plugin(plugin: str, context: RequestContext | None = None) -> str:
        """Get an installed plugin.

        Args:
            plugin: Plugin file without extension, e.g. "akismet/akismet".
            context: Scope under which the request is made.

        Returns:
            str: The plugin as JSON.
        """
        try:
            response = await request("GET", plugin_endpoint(plugin), {"context": context})
        except Exception as e:
            raise tool_error(f'getting plugin "{plugin}"', e) from e

        return format_result(f'Plugin "{plugin}"', response)

    @mcp.tool(
        name="wp_activate_plugin",
        annotations={
            "title": "Activate Plugin",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_activate_plugin(plugin: str) -> str:
        """Activate an installed plugin.

        Args:
            plugin: Plugin file without extension, e.g. "akismet/akismet".
        """
        try:
            response = await request("POST", plugin_endpoint(plugin), {"status": "active"})
        except Exception as e:
            raise tool_error(f'activating plugin "{plugin}"', e) from e

        return format_result(f'Activated plugin "{plugin}"', response)

    @mcp.tool(
        name="wp_deactivate_plugin",
        annotations={
            "title": "Deactivate Plugin",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_deactivate_plugin(plugin: str) -> str:
        """Deactivate an installed plugin.

        Args:
            plugin: Plugin file without extension, e.g. "akismet/akismet".
        """
        try:
            response = await request("POST", plugin_endpoint(plugin), {"status": "inactive"})
        except Exception as e:
            raise tool_error(f'deactivating plugin "{plugin}"', e) from e

        return format_result(f'Deactivated plugin "{plugin}"', response)

    @mcp.tool(
        name="wp_install_plugin",
        annotations={
            "title": "Install Plugin",
            "readOnlyHint": False,
            "destructiveHint": False,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_install_plugin(slug: str, activate: bool = False) -> str:
        """Install a plugin from the WordPress.org directory.

        Use wp_search_plugin_repository to find the slug first.

        Args:
            slug: Directory slug, e.g. "akismet".
            activate: Activate the plugin once installed (default false).

        Returns:
            str: The installed plugin as JSON.
        """
        data = {"slug": slug, "status": "active" if activate else "inactive"}
        try:
            response = await request("POST", "plugins", data)
        except Exception as e:
            raise tool_error(f'installing plugin "{slug}"', e) from e

        return format_result(f'Installed plugin "{slug}"', response)

    @mcp.tool(
        name="wp_delete_plugin",
        annotations={
            "title": "Delete Plugin",
            "readOnlyHint": False,
            "destructiveHint": True,
            "idempotentHint": False,
            "openWorldHint": True,
        },
    )
    async def wp_delete_plugin(plugin: str) -> str:
        """Uninstall a plugin and remove its files. The plugin must be inactive.

        Args:
            plugin: Plugin file without extension, e.g. "akismet/akismet".
        """
        try:
            response = await request("DELETE", plugin_endpoint(plugin))
        except Exception as e:
            raise tool_error(f'deleting plugin "{plugin}"', e) from e

        return format_result(f'Deleted plugin "{plugin}"', response)

    @mcp.tool(
        name="wp_search_plugin_repository",
        annotations={
            "title": "Search WordPress.org Plugin Directory",
            "readOnlyHint": True,
            "destructiveHint": False,
            "idempotentHint": True,
            "openWorldHint": True,
        },
    )
    async def wp_search_plugin_repository(
        query: Annotated[str, Field(min_length=1, max_length=200)],
        page: Annotated[int, Field(ge=1)] = 1,
        per_page: Annotated[int, Field(ge=1, le=MAX_PER_PAGE)] = 10,
    ) -> str:
        """Search the WordPress.org plugin directory.

        Does not touch the configured site; use it to find plugins before
        installing them with wp_install_plugin.

        Args:
            query: Search terms.
            page: Page of results (default 1).
            per_page: Results per page (default 10, max 100).

        Returns:
            str: Result count and paging info followed by plugin summaries as JSON.
        """
        query = query.strip()
        if not query:
            raise ToolError("Error searching plugin repository: query must not be blank")

        try:
            response = await search_plugin_repository(query, page, per_page)
        except Exception as e:
            raise tool_error(f'searching plugin repository for "{query}"', e) from e

        info = response.get("info") or {}
        plugins = [
            PluginSummary.model_validate(p).model_dump()
            for p in response.get("plugins") or []
        ]
        total = info.get("results", len(plugins))
        summary = (
            f'Found {total} plugins matching "{query}" '
            f"(page {info.get('page', page)} of {info.get('pages', 1)})"
        )
        return format_result(summary, plugins)
