"""Popular and recently added content tools for torrentclaw-mcp."""

import logging
from typing import Annotated, Optional

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from ..core.formatters import format_popular_results, format_recent_results
from ..core.http_client import TorrentClawClient, err_text

logger = logging.getLogger(__name__)

LOCALE_PATTERN = r"^[a-z]{2}$"


def register_tools(mcp, client: TorrentClawClient):
    """Register browsing tools with FastMCP."""

    def get_popular(
        limit: Annotated[int, Field(ge=1, le=24, description="Number of items (default: 10)")] = 10,
        page: Annotated[Optional[int], Field(ge=1, description="Page number (default: 1)")] = None,
        locale: Annotated[Optional[str], Field(
            pattern=LOCALE_PATTERN, description="Locale for translated titles (e.g. 'es')")] = None,
    ) -> str:
        """
        Trending movies and TV shows ranked by user click count. Use for recommendations or
        "what's popular". Results do NOT include torrents: call search_content with a title
        to get them.
        """
        try:
            return format_popular_results(client.get_popular(limit, page, locale))
        except Exception as e:
            logger.warning("get_popular failed: %s", e)
            raise ToolError(err_text(e)) from e

    def get_recent(
        limit: Annotated[int, Field(ge=1, le=24, description="Number of items (default: 10)")] = 10,
        page: Annotated[Optional[int], Field(ge=1, description="Page number (default: 1)")] = None,
        locale: Annotated[Optional[str], Field(
            pattern=LOCALE_PATTERN, description="Locale for translated titles (e.g. 'es')")] = None,
    ) -> str:
        """
        Most recently added movies and TV shows, newest first. Results do NOT include
        torrents: call search_content with a title to get them.
        """
        try:
            return format_recent_results(client.get_recent(limit, page, locale))
        except Exception as e:
            logger.warning("get_recent failed: %s", e)
            raise ToolError(err_text(e)) from e

    mcp.tool()(get_popular)
    mcp.tool()(get_recent)
