"""Models for the WordPress.org plugin directory API."""

from __future__ import annotations

import html
import re
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config import MAX_PER_PAGE

_TAG_RE = re.compile(r"<[^>]+>")


class PluginRepositoryQuery(BaseModel):
    """Input for a `query_plugins` search against the plugin directory."""

    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid")

    # Response fields to include (True) or suppress (False)
    FIELDS: ClassVar[dict[str, bool]] = {
        "description": True,
        "sections": False,
        "tested": True,
        "requires": True,
        "rating": True,
        "ratings": False,
        "downloaded": True,
        "downloadlink": True,
        "last_updated": True,
        "homepage": True,
        "tags": True,
    }

    search: str = Field(..., min_length=1, max_length=200)
    page: int = Field(default=1, ge=1)
    per_page: int = Field(default=10, ge=1, le=MAX_PER_PAGE)

    def to_params(self) -> dict[str, Any]:
        """Flatten into the `action` + `request[...]` query the API expects."""
        params: dict[str, Any] = {
            "action": "query_plugins",
            "request[search]": self.search,
            "request[page]": self.page,
            "request[per_page]": self.per_page,
        }
        for name, enabled in self.FIELDS.items():
            params[f"request[fields][{name}]"] = int(enabled)
        return params


class PluginSummary(BaseModel):
    """One plugin from a directory search, trimmed to what an agent needs."""

    model_config = ConfigDict(extra="ignore")

    name: str
    slug: str
    version: str | None = None
    author: str | None = None
    rating: float | None = Field(default=None, description="Average rating, 0-100.")
    num_ratings: int | None = None
    active_installs: int | None = None
    downloaded: int | None = None
    last_updated: str | None = None
    requires: str | None = None
    tested: str | None = None
    homepage: str | None = None
    download_link: str | None = None
    short_description: str | None = None
    tags: list[str] = Field(default_factory=list)

    @field_validator("name", "author", "short_description", mode="before")
    @classmethod
    def strip_html(cls, v: Any) -> Any:
        if isinstance(v, str):
            return html.unescape(_TAG_RE.sub("", v)).strip()
        return v

    @field_validator("requires", "tested", mode="before")
    @classmethod
    def false_to_none(cls, v: Any) -> Any:
        # The directory reports an unknown version as `false`
        if v is False:
            return None
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def tag_names(cls, v: Any) -> Any:
        # Tags arrive as {slug: name}, or [] when a plugin has none
        if isinstance(v, dict):
            return list(v.values())
        return v or []
