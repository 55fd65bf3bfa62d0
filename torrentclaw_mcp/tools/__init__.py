"""MCP tools for torrentclaw-mcp."""

# Each module provides register_tools(mcp, client)
from . import search
from . import browse
from . import details
from . import torrents
from . import cache_tools

__all__ = [
    "search",
    "browse",
    "details",
    "torrents",
    "cache_tools",
]
