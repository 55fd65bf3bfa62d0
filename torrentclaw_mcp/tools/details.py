"""Content detail tools (credits, watch providers) for torrentclaw-mcp."""

import logging
from typing import Annotated

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from ..core.formatters import format_credits, format_watch_providers
from ..core.http_client import TorrentClawClient, err_text

logger = logging.getLogger(__name__)

ContentId = Annotated[int, Field(
    gt=0, le=999_999_999,
    description="Numeric content ID from search_content results (the 'Content ID' field)")]


def register_tools(mcp, client: TorrentClawClient):
    """Register content detail tools with FastMCP."""

    def get_watch_providers(
        content_id: ContentId,
        country: Annotated[str, Field(
            pattern=r"^[A-Z]{2}$", description="ISO 3166-1 country code (e.g. US, ES, GB). Default: US")] = "US",
    ) -> str:
        """
        Where a movie or TV show can be streamed, rented or bought in a given country.
        Requires content_id from search_content. Returns providers grouped as Stream
        (subscription), Free, Rent and Buy.
        """
        try:
            return format_watch_providers(client.get_watch_providers(content_id, country))
        except Exception as e:
            logger.warning("get_watch_providers failed: %s", e)
            raise ToolError(err_text(e)) from e

    def get_credits(content_id: ContentId) -> str:
        """Director and cast for a movie or TV show. Requires content_id from search_content."""
        try:
            return format_credits(client.get_credits(content_id))
        except Exception as e:
            logger.warning("get_credits failed: %s", e)
            raise ToolError(err_text(e)) from e

    mcp.tool()(get_watch_providers)
    mcp.tool()(get_credits)
