"""Tests for the WordPress API client."""

from __future__ import annotations

import base64
import logging

import httpx
import pytest

from wordpress_mcp import client as client_module
from wordpress_mcp.client import (
    create_client,
    get_client,
    probe,
    request,
    search_plugin_repository,
)
from wordpress_mcp.config import PLUGIN_REPOSITORY_URL
from wordpress_mcp.errors import WordPressAPIError


class TestCreateClient:
    """Tests for create_client function."""

    def test_adds_trailing_slash(self):
        """The base URL always ends with a slash."""
        c = create_client("https://example.com/wp-json/wp/v2")
        assert str(c.base_url) == "https://example.com/wp-json/wp/v2/"

    def test_requires_url(self):
        """An empty URL is rejected."""
        with pytest.raises(ValueError):
            create_client("")

    def test_json_headers(self):
        """Requests are sent as JSON."""
        c = create_client("https://example.com/wp-json/wp/v2/")
        assert c.headers["Content-Type"] == "application/json"
        assert c.headers["Accept"] == "application/json"

    @pytest.mark.asyncio
    async def test_basic_auth_header(self):
        """Username and application password become a basic-auth header."""
        seen = {}

        def handler(req: httpx.Request) -> httpx.Response:
            seen["auth"] = req.headers.get("Authorization")
            return httpx.Response(200, json={})

        c = create_client(
            "https://example.com/wp-json/wp/v2/",
            "admin",
            "abcd efgh",
            transport=httpx.MockTransport(handler),
        )
        async with c:
            await c.get("")

        expected = base64.b64encode(b"admin:abcd efgh").decode()
        assert seen["auth"] == f"Basic {expected}"

    @pytest.mark.asyncio
    async def test_no_auth_without_both_credentials(self):
        """A username alone does not produce an auth header."""
        seen = {}

        def handler(req: httpx.Request) -> httpx.Response:
            seen["auth"] = req.headers.get("Authorization")
            return httpx.Response(200, json={})

        c = create_client(
            "https://example.com/wp-json/wp/v2/",
            "admin",
            "",
            transport=httpx.MockTransport(handler),
        )
        async with c:
            await c.get("")

        assert seen["auth"] is None


class TestGetClient:
    """Tests for get_client function."""

    def test_not_initialized(self, monkeypatch):
        """Calls before startup fail with a clear message."""
        monkeypatch.setattr(client_module, "_client", None)
        with pytest.raises(RuntimeError, match="not initialized"):
            get_client()

    @pytest.mark.asyncio
    async def test_request_not_initialized(self, monkeypatch):
        """request() surfaces the same error."""
        monkeypatch.setattr(client_module, "_client", None)
        with pytest.raises(RuntimeError, match="not initialized"):
            await request("GET", "posts")


class TestRequest:
    """Tests for request function."""

    @pytest.mark.asyncio
    async def test_get_sends_query_params(self, wp_api):
        """GET arguments go in the query string, unset ones dropped."""
        wp_api.add("GET", "posts", [{"id": 1}])

        result = await request(
            "GET", "/posts", {"per_page": 5, "categories": [3, 4], "search": None}
        )

        assert result == [{"id": 1}]
        params = wp_api.last.url.params
        assert params["per_page"] == "5"
        assert params["categories"] == "3,4"
        assert "search" not in params
        assert wp_api.last.url.path == "/wp-json/wp/v2/posts"

    @pytest.mark.asyncio
    async def test_post_sends_json_body(self, wp_api):
        """POST arguments go in a JSON body."""
        wp_api.add("POST", "posts", {"id": 7}, status=201)

        result = await request("POST", "posts", {"title": "Hi", "tags": [1], "slug": None})

        assert result == {"id": 7}
        assert wp_api.last_json() == {"title": "Hi", "tags": [1]}
        assert wp_api.last.url.query == b""

    @pytest.mark.asyncio
    async def test_delete_sends_query_params(self, wp_api):
        """DELETE arguments go in the query string."""
        wp_api.add("DELETE", "posts/7", {"deleted": True})

        await request("delete", "posts/7", {"force": True})

        assert wp_api.last.method == "DELETE"
        assert wp_api.last.url.params["force"] == "true"

    @pytest.mark.asyncio
    async def test_empty_endpoint_hits_base(self, wp_api):
        """An empty endpoint requests the namespace index."""
        wp_api.add("GET", "", {"namespace": "wp/v2"})

        result = await request("GET", "")

        assert result == {"namespace": "wp/v2"}

    @pytest.mark.asyncio
    async def test_rest_error(self, wp_api):
        """REST error bodies become WordPressAPIError."""
        wp_api.add(
            "GET",
            "posts/99",
            {"code": "rest_post_invalid_id", "message": "Invalid post ID.", "data": {"status": 404}},
            status=404,
        )

        with pytest.raises(WordPressAPIError) as exc_info:
            await request("GET", "posts/99")

        assert exc_info.value.status_code == 404
        assert exc_info.value.code == "rest_post_invalid_id"
        assert exc_info.value.message == "Invalid post ID."

    @pytest.mark.asyncio
    async def test_non_json_error(self, monkeypatch):
        """Errors without a JSON body fall back to the reason phrase."""

        def handler(req: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>Bad gateway</html>")

        c = create_client("https://example.com/wp-json/wp/v2/", transport=httpx.MockTransport(handler))
        monkeypatch.setattr(client_module, "_client", c)

        with pytest.raises(WordPressAPIError) as exc_info:
            await request("GET", "posts")

        assert exc_info.value.status_code == 502
        assert exc_info.value.message == "Bad Gateway"
        assert exc_info.value.code is None

    @pytest.mark.asyncio
    async def test_empty_body(self, monkeypatch):
        """An empty success body returns None."""

        def handler(req: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        c = create_client("https://example.com/wp-json/wp/v2/", transport=httpx.MockTransport(handler))
        monkeypatch.setattr(client_module, "_client", c)

        assert await request("DELETE", "posts/1") is None

    @pytest.mark.asyncio
    async def test_transport_error(self, monkeypatch):
        """Connection failures become WordPressAPIError without a status."""

        def handler(req: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=req)

        c = create_client("https://example.com/wp-json/wp/v2/", transport=httpx.MockTransport(handler))
        monkeypatch.setattr(client_module, "_client", c)

        with pytest.raises(WordPressAPIError) as exc_info:
            await request("GET", "posts")

        assert exc_info.value.status_code is None
        assert "connection refused" in str(exc_info.value)


class TestProbe:
    """Tests for the startup connectivity probe."""

    @pytest.mark.asyncio
    async def test_probe_ok(self):
        """A reachable API passes."""
        c = create_client(
            "https://example.com/wp-json/wp/v2/",
            transport=httpx.MockTransport(lambda req: httpx.Response(200, json={})),
        )
        await probe(c)

    @pytest.mark.asyncio
    async def test_probe_failure(self):
        """An error status aborts startup."""
        c = create_client(
            "https://example.com/wp-json/wp/v2/",
            transport=httpx.MockTransport(lambda req: httpx.Response(401, json={})),
        )
        with pytest.raises(RuntimeError, match="Failed to connect to WordPress API"):
            await probe(c)


def _patch_lifespan_client(monkeypatch, status):
    """Point app_lifespan at a fake site answering every request with `status`."""
    created = []

    def fake_create_client(api_url, username="", password="", timeout=30.0):
        c = create_client(
            api_url,
            username,
            password,
            timeout,
            transport=httpx.MockTransport(lambda req: httpx.Response(status, json={})),
        )
        created.append(c)
        return c

    monkeypatch.setattr(client_module, "API_URL", "https://example.com/wp-json/wp/v2/")
    monkeypatch.setattr(client_module, "create_client", fake_create_client)
    return created


class TestAppLifespan:
    """Tests for the server lifespan that owns the API client."""

    @pytest.mark.asyncio
    async def test_missing_url(self, monkeypatch):
        """Startup fails without WORDPRESS_API_URL."""
        monkeypatch.setattr(client_module, "API_URL", "")
        with pytest.raises(RuntimeError, match="WORDPRESS_API_URL is not set"):
            async with client_module.app_lifespan(None):
                pass
        assert client_module._client is None

    @pytest.mark.asyncio
    async def test_unreachable_site_closes_client(self, monkeypatch):
        """A failed connectivity check closes the client and clears it."""
        created = _patch_lifespan_client(monkeypatch, 500)
        with pytest.raises(RuntimeError, match="Failed to connect to WordPress API"):
            async with client_module.app_lifespan(None):
                pass
        assert client_module._client is None
        assert created[0].is_closed

    @pytest.mark.asyncio
    async def test_yields_client_and_closes_on_shutdown(self, monkeypatch):
        """The client is live inside the lifespan and closed after it."""
        created = _patch_lifespan_client(monkeypatch, 200)
        async with client_module.app_lifespan(None) as state:
            assert state == {"client": created[0]}
            assert get_client() is created[0]
        assert client_module._client is None
        assert created[0].is_closed


class TestSearchPluginRepository:
    """Tests for search_plugin_repository function."""

    @pytest.mark.asyncio
    async def test_search(self, sample_plugin_search):
        """The directory is queried without the site's credentials."""
        seen = []

        def handler(req: httpx.Request) -> httpx.Response:
            seen.append(req)
            return httpx.Response(200, json=sample_plugin_search)

        result = await search_plugin_repository(
            "contact form", page=2, per_page=5, transport=httpx.MockTransport(handler)
        )

        assert result["info"]["results"] == 25
        req = seen[0]
        assert str(req.url).startswith(PLUGIN_REPOSITORY_URL)
        assert req.method == "GET"
        assert req.url.params["action"] == "query_plugins"
        assert req.url.params["request[search]"] == "contact form"
        assert req.url.params["request[page]"] == "2"
        assert req.url.params["request[per_page]"] == "5"
        assert "Authorization" not in req.headers

    @pytest.mark.asyncio
    async def test_search_error(self):
        """Directory errors are raised as WordPressAPIError."""
        transport = httpx.MockTransport(
            lambda req: httpx.Response(500, json={"error": "Plugin API is down"})
        )
        with pytest.raises(WordPressAPIError) as exc_info:
            await search_plugin_repository("seo", transport=transport)
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_search_unexpected_body(self):
        """A non-object body is rejected."""
        transport = httpx.MockTransport(lambda req: httpx.Response(200, json=["nope"]))
        with pytest.raises(WordPressAPIError, match="Unexpected"):
            await search_plugin_repository("seo", transport=transport)


class TestLogging:
    """Tests for request logging."""

    @pytest.mark.asyncio
    async def test_request_log_does_not_include_password(self, wp_api, caplog):
        """Secrets never reach the log, even at DEBUG."""
        wp_api.add("GET", "posts", [])

        with caplog.at_level(logging.DEBUG, logger="wordpress_mcp"):
            await request("GET", "posts")

        assert "GET" in caplog.text
        assert "app-password" not in caplog.text
