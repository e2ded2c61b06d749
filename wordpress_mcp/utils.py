"""Utility functions for request marshaling and response formatting."""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import ValidationError

from .config import logger
from .errors import WordPressAPIError


def build_params(data: dict[str, Any] | None, query: bool = False) -> dict[str, Any]:
    """Drop unset values from tool arguments before sending them.

    Args:
        data: Raw arguments (None values mean "not provided").
        query: When True, also flatten values for a query string: lists become
            comma-separated strings (PHP keeps only the last repeated key) and
            booleans become ``true``/``false``.

    Returns:
        A new dict safe to pass as query params or a JSON body.
    """
    if not data:
        return {}

    params: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        if query:
            if isinstance(value, bool):
                value = "true" if value else "false"
            elif isinstance(value, (list, tuple, set)):
                value = ",".join(str(v) for v in value)
        params[key] = value
    return params


def normalize_endpoint(endpoint: str) -> str:
    """Strip the leading slash so the endpoint joins onto the base URL."""
    return endpoint.lstrip("/")


def path_segment(value: str | int, keep_slash: bool = False) -> str:
    """Percent-encode a value for use inside an endpoint path."""
    return quote(str(value), safe="/" if keep_slash else "")


def count_items(data: Any) -> int:
    """Number of entries in a list response, or keys in a mapping response."""
    if isinstance(data, (list, dict)):
        return len(data)
    return 0


def format_result(summary: str, data: Any) -> str:
    """Render a tool result as a summary line followed by pretty-printed JSON."""
    return f"{summary}:\n\n{json.dumps(data, indent=2, ensure_ascii=False)}"


def created_summary(noun: str, response: Any) -> str:
    """Summary line for a create call; the body may be empty or not an object."""
    new_id = response.get("id") if isinstance(response, dict) else None
    if new_id is None:
        return f"Created {noun}"
    return f"Created {noun} {new_id}"


def tool_error(action: str, e: Exception) -> ToolError:
    """Build the error reported back to the caller for a failed tool.

    Logs detailed information for unexpected exceptions while keeping the
    message returned to the client short.

    Args:
        action: What the tool was doing, e.g. ``listing block types``.
        e: The exception raised by the client.

    Returns:
        ToolError to raise; the dispatcher turns it into an ``isError`` result.
    """
    if isinstance(e, WordPressAPIError):
        logger.error("WordPress API error while %s: %s", action, e)
        detail = str(e)
    elif isinstance(e, ValidationError):
        logger.error("Invalid arguments while %s: %s", action, e)
        detail = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'input'}: {err['msg']}"
            for err in e.errors()
        )
    elif isinstance(e, RuntimeError):
        # Client not initialized or connection probe failure - pass through
        detail = str(e)
    else:
        logger.exception("Unexpected error while %s: %s", action, e)
        detail = "An unexpected error occurred."
    return ToolError(f"Error {action}: {detail}")
