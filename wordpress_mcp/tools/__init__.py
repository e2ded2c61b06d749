"""MCP tool implementations for the WordPress REST API."""

from .block_types import register_block_type_tools
from .comments import register_comment_tools
from .media import register_media_tools
from .pages import register_page_tools
from .plugins import register_plugin_tools
from .posts import register_post_tools
from .site import register_site_tools
from .terms import register_term_tools
from .users import register_user_tools

__all__ = [
    "register_site_tools",
    "register_post_tools",
    "register_page_tools",
    "register_media_tools",
    "register_user_tools",
    "register_term_tools",
    "register_comment_tools",
    "register_plugin_tools",
    "register_block_type_tools",
]


def register_all_tools(mcp):
    """Register all tools with the MCP server."""
    register_site_tools(mcp)
    register_post_tools(mcp)
    register_page_tools(mcp)
    register_media_tools(mcp)
    register_user_tools(mcp)
    register_term_tools(mcp)
    register_comment_tools(mcp)
    register_plugin_tools(mcp)
    register_block_type_tools(mcp)
