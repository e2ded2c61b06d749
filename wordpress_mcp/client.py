"""HTTP client management and request execution for the WordPress REST API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx

from .config import (
    API_URL,
    PASSWORD,
    PLUGIN_REPOSITORY_URL,
    REQUEST_TIMEOUT,
    USERNAME,
    logger,
)
from .errors import WordPressAPIError
from .models import PluginRepositoryQuery
from .utils import build_params, normalize_endpoint

# Global state (set during lifespan)
_client: httpx.AsyncClient | None = None


def get_client() -> httpx.AsyncClient:
    """Get the WordPress API client, raising if not initialized.

    Raises:
        RuntimeError: If the server is not yet initialized (client is None).
    """
    if _client is None:
        raise RuntimeError(
            "WordPress client not initialized. Server may still be starting up."
        )
    return _client


def create_client(
    api_url: str,
    username: str = "",
    password: str = "",
    timeout: float = REQUEST_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Build the client used for every call against the site's REST API.

    Basic auth is only attached when both the username and the application
    password are present.

    Args:
        api_url: REST API base URL (e.g. https://example.com/wp-json/wp/v2).
        username: WordPress username.
        password: Application password for that user.
        timeout: Request timeout in seconds.
        transport: Optional transport override (used by tests).
    """
    if not api_url:
        raise ValueError("WordPress API URL is required.")

    base_url = api_url if api_url.endswith("/") else f"{api_url}/"
    auth = httpx.BasicAuth(username, password) if username and password else None

    return httpx.AsyncClient(
        base_url=base_url,
        auth=auth,
        headers={"Content-Type": "application/json", "Accept": "application/json"},
        timeout=timeout,
        transport=transport,
    )


@asynccontextmanager
async def app_lifespan(app):
    """Create the API client, verify the site is reachable and close it on shutdown.

    Args:
        app: The FastMCP application instance (required by lifespan protocol).
    """
    global _client

    if not API_URL:
        raise RuntimeError(
            "WORDPRESS_API_URL is not set. Check your environment or .env file."
        )

    _client = create_client(API_URL, USERNAME, PASSWORD, REQUEST_TIMEOUT)
    try:
        await probe(_client)
        logger.info("Connected to WordPress API at %s", _client.base_url)
        yield {"client": _client}
    finally:
        await _client.aclose()
        _client = None
        logger.info("WordPress client closed")


async def probe(client: httpx.AsyncClient) -> None:
    """Request the namespace index to confirm the API answers.

    Raises:
        RuntimeError: If the request fails or returns an error status.
    """
    try:
        response = await client.get("")
        response.raise_for_status()
    except httpx.HTTPError as e:
        logger.error("Failed to connect to WordPress API: %s", e)
        raise RuntimeError(f"Failed to connect to WordPress API: {e}") from e


def _decode(response: httpx.Response) -> Any:
    """Return the JSON body of a response, raising WordPressAPIError on failure."""
    if response.is_error:
        message = response.reason_phrase or "Request failed"
        code = None
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("message") or message
            code = body.get("code")
        raise WordPressAPIError(message, response.status_code, code)

    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as e:
        raise WordPressAPIError(
            "Invalid JSON in response", response.status_code
        ) from e


async def request(
    method: str,
    endpoint: str,
    data: dict[str, Any] | None = None,
) -> Any:
    """Execute a request against the WordPress REST API.

    GET and DELETE send ``data`` as query parameters; POST and PUT send it
    as a JSON body. Unset (None) values are dropped.

    Args:
        method: HTTP method.
        endpoint: Endpoint relative to the API base URL (e.g. ``posts/12``).
        data: Query parameters or body fields.

    Returns:
        Decoded JSON response, or None for an empty body.

    Raises:
        RuntimeError: If the client is not initialized.
        WordPressAPIError: On transport errors or non-2xx responses.
    """
    client = get_client()
    method = method.upper()
    path = normalize_endpoint(endpoint)

    kwargs: dict[str, Any] = {}
    if method in ("GET", "DELETE"):
        kwargs["params"] = build_params(data, query=True)
    else:
        kwargs["json"] = build_params(data)

    logger.debug("REQUEST %s %s%s %s", method, client.base_url, path, kwargs)

    try:
        response = await client.request(method, path, **kwargs)
    except httpx.HTTPError as e:
        logger.error("%s %s failed: %s", method, path, e)
        raise WordPressAPIError(f"Request failed: {e}") from e

    logger.debug("RESPONSE %s %s -> %s", method, path, response.status_code)
    return _decode(response)


async def search_plugin_repository(
    search: str,
    page: int = 1,
    per_page: int = 10,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict[str, Any]:
    """Search the WordPress.org plugin directory.

    Uses its own unauthenticated client; the site's credentials never leave
    for api.wordpress.org.

    Args:
        search: Search terms.
        page: Page number (1-based).
        per_page: Results per page.
        transport: Optional transport override (used by tests).

    Returns:
        Decoded response with ``info`` (page, pages, results) and ``plugins``.

    Raises:
        WordPressAPIError: On transport errors or non-2xx responses.
    """
    params = PluginRepositoryQuery(search=search, page=page, per_page=per_page).to_params()
    logger.debug("PLUGIN DIRECTORY REQUEST %s %s", PLUGIN_REPOSITORY_URL, params)

    try:
        async with httpx.AsyncClient(timeout=REQUEST_TIMEOUT, transport=transport) as client:
            response = await client.get(PLUGIN_REPOSITORY_URL, params=params)
    except httpx.HTTPError as e:
        logger.error("Plugin directory request failed: %s", e)
        raise WordPressAPIError(f"Plugin directory request failed: {e}") from e

    data = _decode(response)
    if not isinstance(data, dict):
        raise WordPressAPIError("Unexpected plugin directory response", response.status_code)

    logger.debug(
        "PLUGIN DIRECTORY RESPONSE %s, %d plugins",
        response.status_code,
        len(data.get("plugins") or []),
    )
    return data
