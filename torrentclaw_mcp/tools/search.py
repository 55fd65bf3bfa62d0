"""Search tools for torrentclaw-mcp."""

import logging
from typing import Annotated, Literal, Optional

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from ..core.formatters import format_search_results
from ..core.http_client import TorrentClawClient, err_text
from ..models.types import SearchParams

logger = logging.getLogger(__name__)

NO_CONTROL_CHARS = r"^[^\x00-\x08\x0B\x0C\x0E-\x1F]*$"
DEFAULT_LIMIT = 20


def register_tools(mcp, client: TorrentClawClient):
    """Register search-related tools with FastMCP."""

    def search_content(
        query: Annotated[str, Field(
            min_length=1, max_length=200, pattern=NO_CONTROL_CHARS,
            description="Search query, typically a movie or TV show title (e.g. 'The Matrix', "
                        "'Breaking Bad'). Supports partial matches. Season/episode can be included "
                        "in the query (e.g. 'Bluey s01e05').")],
        type: Annotated[Optional[Literal["movie", "show"]], Field(
            description="Filter by content type: 'movie' or 'show'")] = None,
        genre: Annotated[Optional[str], Field(
            max_length=50, pattern=r"^[a-zA-Z\s&-]+$",
            description="Filter by genre name, e.g. Action, Comedy, Drama, Science Fiction")] = None,
        year_min: Annotated[Optional[int], Field(description="Minimum release year (e.g. 2020)")] = None,
        year_max: Annotated[Optional[int], Field(description="Maximum release year (e.g. 2025)")] = None,
        min_rating: Annotated[Optional[float], Field(
            ge=0, le=10, description="Minimum IMDb rating (0-10)")] = None,
        quality: Annotated[Optional[Literal["480p", "720p", "1080p", "2160p"]], Field(
            description="Filter torrents by resolution")] = None,
        language: Annotated[Optional[str], Field(
            pattern=r"^[a-z]{2}$",
            description="ISO 639-1 language code to filter torrents (e.g. 'en', 'es', 'fr')")] = None,
        audio: Annotated[Optional[str], Field(
            pattern=r"^[a-zA-Z0-9.]+$",
            description="Filter torrents by audio codec (e.g. 'aac', 'flac', 'atmos'). Substring match.")] = None,
        hdr: Annotated[Optional[Literal["hdr10", "dolby_vision", "hdr10plus", "hlg"]], Field(
            description="Filter torrents by HDR format")] = None,
        availability: Annotated[Optional[Literal["all", "available", "unavailable"]], Field(
            description="'available' (has seeders), 'unavailable' (no seeders), 'all' (default)")] = None,
        season: Annotated[Optional[int], Field(
            ge=0, le=99, description="Season number for TV shows; only torrents for that season are shown")] = None,
        episode: Annotated[Optional[int], Field(
            ge=0, le=999, description="Episode number; use together with season")] = None,
        locale: Annotated[Optional[str], Field(
            pattern=r"^[a-z]{2}$",
            description="Locale for translated titles and overviews (e.g. 'es'). English if omitted.")] = None,
        sort: Annotated[Literal["relevance", "seeders", "year", "rating", "added"], Field(
            description="Sort order for results")] = "relevance",
        page: Annotated[Optional[int], Field(ge=1, le=1000, description="Page number (default: 1)")] = None,
        limit: Annotated[Optional[int], Field(ge=1, le=50, description="Results per page (default: 20)")] = None,
        country: Annotated[Optional[str], Field(
            pattern=r"^[A-Z]{2}$",
            description="ISO 3166-1 country code for streaming availability (e.g. US, ES). "
                        "Omit for no streaming data.")] = None,
        compact: Annotated[bool, Field(
            description="Shorter magnet links (hash only, no trackers) to reduce output size")] = False,
    ) -> str:
        """
        Search for movies and TV shows by title, genre, year, rating, or quality. Returns
        matching content with metadata (title, year, genres, IMDb/TMDB ratings) and torrent
        download options (magnet links, quality, seeders, file size). This is the primary tool:
        use it first when a user asks to find, download, or learn about a movie or TV show.
        Results include a content_id needed by get_watch_providers and get_credits. For TV
        shows, filter by season/episode. When presenting results, make magnet links clickable
        using markdown [Download](magnet:?xt=...) and include the content URL.
        """
        params = SearchParams(
            query=query, type=type, genre=genre, year_min=year_min, year_max=year_max,
            min_rating=min_rating, quality=quality, language=language, audio=audio, hdr=hdr,
            availability=availability, locale=locale, season=season, episode=episode,
            sort=sort, page=page, limit=limit or DEFAULT_LIMIT, country=country,
        )
        try:
            data = client.search(params)
        except Exception as e:
            logger.warning("search_content failed: %s", e)
            raise ToolError(err_text(e)) from e
        return format_search_results(data, compact=compact, season=season, episode=episode)

    def autocomplete(
        query: Annotated[str, Field(
            min_length=2, max_length=200, pattern=NO_CONTROL_CHARS,
            description="Partial title (min 2 chars), e.g. 'break' -> 'Breaking Bad'")],
    ) -> str:
        """
        Type-ahead suggestions for movies and TV shows. Use to validate or disambiguate a
        title before calling search_content. Returns up to 8 suggestions with id, title,
        year and content type.
        """
        try:
            data = client.autocomplete(query)
        except Exception as e:
            logger.warning("autocomplete failed: %s", e)
            raise ToolError(err_text(e)) from e

        if not data.suggestions:
            return f'No suggestions for "{query}". Try search_content for a full search.'
        lines = []
        for i, s in enumerate(data.suggestions, 1):
            year = f" ({s.year})" if s.year else ""
            lines.append(f"{i}. {s.title}{year} [{s.content_type}] — ID: {s.id}")
        return f'Suggestions for "{query}":\n' + "\n".join(lines)

    mcp.tool()(search_content)
    mcp.tool()(autocomplete)
