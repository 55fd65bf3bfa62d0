# SPDX-License-Identifier: MIT
"""
torrentclaw-mcp server entrypoint.

Wires FastMCP with the TorrentClaw client and every tool, resource and prompt module.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .config import Settings, ConfigError
from .core.http_client import TorrentClawClient
from .prompts import register_prompts
from .resources import register_resources
from .tools import search, browse, details, torrents, cache_tools

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Search and discover movies and TV shows with torrent downloads, streaming availability, "
    "and cast/crew metadata. Start with search_content to find content, then use "
    "get_watch_providers or get_credits with the content_id. Use get_popular/get_recent to "
    "browse (no torrents: search for a title to get torrents)."
)


def create_app(settings: Optional[Settings] = None, client: Optional[TorrentClawClient] = None) -> FastMCP:
    settings = settings or Settings()
    client = client or TorrentClawClient(settings)
    mcp = FastMCP("torrentclaw", instructions=INSTRUCTIONS)

    # Register tools from each module
    search.register_tools(mcp, client)
    browse.register_tools(mcp, client)
    details.register_tools(mcp, client)
    torrents.register_tools(mcp, client)
    cache_tools.register_tools(mcp, client)

    register_resources(mcp, client)
    register_prompts(mcp)

    return mcp


def main() -> None:
    settings = Settings()
    # stdout carries the stdio transport
    logging.basicConfig(
        stream=sys.stderr,
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        app = create_app(settings)
    except ConfigError as e:
        logger.error("%s", e)
        sys.exit(1)
    logger.info("TorrentClaw MCP server running on stdio (api: %s)", settings.api_url)
    app.run()


if __name__ == "__main__":
    main()
