"""WordPress MCP Server.

An MCP server exposing the WordPress REST API as tools: content, media,
users, taxonomies, comments, plugins and settings, plus search of the
WordPress.org plugin directory.
"""

from .server import main, mcp

__all__ = ["mcp", "main"]
__version__ = "1.0.0"
