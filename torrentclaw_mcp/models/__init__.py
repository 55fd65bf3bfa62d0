"""Models and type definitions for torrentclaw-mcp."""

from .types import (
    SearchParams, TorrentInfo, SearchResult, SearchResponse, AutocompleteResponse,
    PopularResponse, RecentResponse, CreditsResponse, WatchProvidersResponse,
    StatsResponse, TrackResponse, ScanRequestResponse,
)

__all__ = [
    "SearchParams", "TorrentInfo", "SearchResult", "SearchResponse", "AutocompleteResponse",
    "PopularResponse", "RecentResponse", "CreditsResponse", "WatchProvidersResponse",
    "StatsResponse", "TrackResponse", "ScanRequestResponse",
]
