"""Cache management tools for torrentclaw-mcp."""

from ..core.http_client import TorrentClawClient


def register_tools(mcp, client: TorrentClawClient):
    """Register cache-related tools with FastMCP."""

    def cache_info() -> dict:
        """Response cache statistics (hits, misses, size, TTL)."""
        return client.cache.info()

    def cache_clear() -> dict:
        """Drop every cached API response."""
        return {"cleared": client.cache.clear()}

    mcp.tool()(cache_info)
    mcp.tool()(cache_clear)
