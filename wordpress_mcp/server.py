"""WordPress MCP Server entry point."""

from __future__ import annotations

import signal
import sys

from mcp.server.fastmcp import FastMCP

from .client import app_lifespan
from .config import API_URL, logger
from .tools import register_all_tools

# Create the MCP server
mcp = FastMCP(
    "wordpress_mcp",
    instructions=(
        "Tools for managing a WordPress site through its REST API: posts, pages, "
        "media, users, categories, tags, comments, plugins, settings and block "
        "types, plus search of the WordPress.org plugin directory."
    ),
    lifespan=app_lifespan,
)

# Register all tools
register_all_tools(mcp)


def _handle_sigterm(signum, frame):
    logger.info("Received SIGTERM, shutting down")
    sys.exit(0)


def main():
    """Run the MCP server over stdio."""
    if not API_URL:
        logger.error(
            "WORDPRESS_API_URL is not set. Check your environment or .env file."
        )
        sys.exit(1)

    signal.signal(signal.SIGTERM, _handle_sigterm)

    logger.info("Starting WordPress MCP server for %s", API_URL)
    try:
        mcp.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


if __name__ == "__main__":
    main()
