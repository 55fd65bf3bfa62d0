"""Core functionality for torrentclaw-mcp."""

from .cache import ResponseCache, CacheEntry
from .http_client import (
    TorrentClawClient, TorrentClawError, ApiError, TransportError, DecodeError, err_text,
)
from .formatters import (
    format_search_results, format_popular_results, format_recent_results,
    format_credits, format_watch_providers,
)

__all__ = [
    "ResponseCache", "CacheEntry",
    "TorrentClawClient", "TorrentClawError", "ApiError", "TransportError", "DecodeError", "err_text",
    "format_search_results", "format_popular_results", "format_recent_results",
    "format_credits", "format_watch_providers",
]
