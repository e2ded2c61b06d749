"""Parameter types and response models for MCP tools."""

from .base import (
    CommentDefaultStatus,
    CommentStatus,
    MediaType,
    Order,
    PluginStatus,
    PostOrderBy,
    PostStatus,
    RequestContext,
)
from .plugins import PluginRepositoryQuery, PluginSummary

__all__ = [
    # Base
    "RequestContext",
    "PostStatus",
    "CommentStatus",
    "CommentDefaultStatus",
    "Order",
    "PostOrderBy",
    "MediaType",
    "PluginStatus",
    # Plugin directory
    "PluginRepositoryQuery",
    "PluginSummary",
]
