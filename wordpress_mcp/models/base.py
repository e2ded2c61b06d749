"""Base types shared by MCP tool parameters."""

from __future__ import annotations

from typing import Literal

# Scope under which the REST request is made; `edit` needs edit permissions
RequestContext = Literal["view", "embed", "edit"]

PostStatus = Literal["publish", "future", "draft", "pending", "private", "trash"]

CommentStatus = Literal["approve", "hold", "spam", "trash"]

Order = Literal["asc", "desc"]

PostOrderBy = Literal[
    "author", "date", "id", "include", "modified", "parent",
    "relevance", "slug", "title", "menu_order",
]

MediaType = Literal["image", "video", "text", "application", "audio"]

PluginStatus = Literal["active", "inactive"]

CommentDefaultStatus = Literal["open", "closed"]
