"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from wordpress_mcp import client as client_module
from wordpress_mcp.client import create_client
from wordpress_mcp.server import mcp

BASE_URL = "https://example.com/wp-json/wp/v2/"
BASE_PATH = "/wp-json/wp/v2/"


class FakeWordPress:
    """Canned REST API responses keyed by (method, endpoint)."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], tuple[int, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, endpoint: str, body: Any, status: int = 200) -> None:
        self.routes[(method.upper(), endpoint)] = (status, body)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        endpoint = request.url.path[len(BASE_PATH):]
        status, body = self.routes.get(
            (request.method, endpoint),
            (404, {"code": "rest_no_route", "message": "No route was found."}),
        )
        if body is None:
            return httpx.Response(status)
        return httpx.Response(status, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def wp_api(monkeypatch):
    """Fake WordPress site installed as the server's API client."""
    api = FakeWordPress()
    fake_client = create_client(
        BASE_URL, "admin", "app-password", transport=httpx.MockTransport(api.handle)
    )
    monkeypatch.setattr(client_module, "_client", fake_client)
    return api


@pytest.fixture
def call_tool():
    """Return the handler function registered under a tool name."""

    def _get(name: str):
        tool = mcp._tool_manager._tools.get(name)
        assert tool is not None, f"Tool '{name}' not found"
        return tool.fn

    return _get


@pytest.fixture
def sample_block_types():
    """Sample block-types listing."""
    return [
        {"name": "core/paragraph", "title": "Paragraph", "category": "text"},
        {"name": "core/heading", "title": "Heading", "category": "text"},
    ]


@pytest.fixture
def sample_plugin_search():
    """Sample plugin directory response."""
    return {
        "info": {"page": 1, "pages": 3, "results": 25},
        "plugins": [
            {
                "name": "Contact Form 7",
                "slug": "contact-form-7",
                "version": "5.9.8",
                "author": '<a href="https://ideasilo.wordpress.com/">Takayuki Miyoshi</a>',
                "rating": 80,
                "num_ratings": 2000,
                "active_installs": 5000000,
                "downloaded": 300000000,
                "last_updated": "2024-07-17 5:03am GMT",
                "requires": "6.4",
                "tested": "6.6.1",
                "homepage": "https://contactform7.com/",
                "download_link": "https://downloads.wordpress.org/plugin/contact-form-7.5.9.8.zip",
                "short_description": "Just another contact form plugin. Simple but flexible.",
                "tags": {"contact-form": "contact form", "email": "email"},
                "description": "<p>Long description</p>",
            }
        ],
    }
