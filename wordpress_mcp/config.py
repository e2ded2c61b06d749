"""Configuration and constants for the WordPress MCP Server."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Configuration from environment variables
# ---------------------------------------------------------------------------

API_URL = os.getenv("WORDPRESS_API_URL", "")  # e.g. https://example.com/wp-json/wp/v2/
USERNAME = os.getenv("WORDPRESS_USERNAME", "")
PASSWORD = os.getenv("WORDPRESS_PASSWORD", "")  # Application password (WP 5.6+)

REQUEST_TIMEOUT = float(os.getenv("WORDPRESS_TIMEOUT", "30"))

LOG_FILE = os.getenv("WORDPRESS_LOG_FILE", "")
LOG_LEVEL = os.getenv("WORDPRESS_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

PLUGIN_REPOSITORY_URL = "https://api.wordpress.org/plugins/info/1.2/"

# The REST API refuses per_page above this
MAX_PER_PAGE = 100

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

# stdout belongs to the stdio transport, so everything goes to stderr
logger = logging.getLogger("wordpress_mcp")
logging.basicConfig(level=LOG_LEVEL, stream=sys.stderr)

if LOG_FILE:
    Path(LOG_FILE).parent.mkdir(parents=True, exist_ok=True)
    _file_handler = logging.FileHandler(LOG_FILE, encoding="utf-8")
    _file_handler.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(_file_handler)

if not (USERNAME and PASSWORD):
    logger.warning(
        "WORDPRESS_USERNAME/WORDPRESS_PASSWORD not both set. Requests will be "
        "unauthenticated and write tools will be rejected by the site."
    )
