"""Prompt templates for torrentclaw-mcp."""

from typing import Optional


def presentation_guide() -> str:
    """Guide for presenting torrent search results in a user-friendly format"""
    return (
        "When presenting torrent search results to users, follow these best practices:\n\n"
        "1. **Magnet Links**: Always make magnet links clickable using markdown format, e.g. "
        "[📥 Download](magnet:?xt=urn:btih:HASH...). Never show raw magnet URIs.\n\n"
        "2. **Content URL**: Include the TorrentClaw content URL for browsing all seasons/episodes, "
        "e.g. [🔗 View all seasons on TorrentClaw](https://torrentclaw.com/shows/...).\n\n"
        "3. **Presentation Format**: Group by episode/season for TV shows; show quality, size and "
        "seeder count prominently; highlight torrents with active seeders and warn on 0 seeders.\n\n"
        "4. **Helpful Information**: Recommend torrents with more seeders, suggest alternatives if "
        "the requested season/episode has no seeders, and offer to search other qualities.\n\n"
        "Apply these practices to make results actionable and user-friendly."
    )


def search_movie(title: str) -> str:
    """Search for a movie by title and get torrent download options"""
    return (
        f'Search for the movie "{title}" using search_content with type="movie". Present the '
        "results with clickable magnet links using markdown format [📥 Download](magnet:...), "
        "include the content URL for more details, and show quality/size/seeders clearly. If "
        "results are found, also call get_watch_providers with the content_id to check streaming "
        "availability."
    )


def search_show(title: str, season: Optional[int] = None) -> str:
    """Search for a TV show by title and get torrent download options"""
    season_arg = f" and season={season}" if season else ""
    return (
        f'Search for the TV show "{title}" using search_content with type="show"{season_arg}. '
        "Present results grouped by episode with:\n"
        "- Episode identifier (e.g., S04E01)\n"
        "- Quality, size, and seeder count\n"
        "- Clickable magnet links using markdown: [📥 Download](magnet:...)\n"
        "- Content URL for browsing all seasons: [🔗 View all seasons](URL)\n"
        "- Recommendations for torrents with most seeders\n"
        "- Warnings if torrents have 0 seeders"
    )


def whats_new() -> str:
    """Discover recently added movies and TV shows"""
    return (
        "Use get_recent to show the most recently added movies and TV shows. Present each with "
        "its title, year, type (movie/show), and ratings."
    )


def where_to_watch(title: str, country: Optional[str] = None) -> str:
    """Find where to watch a movie or TV show via streaming services"""
    return (
        f'Search for "{title}" using search_content with country="{country or "US"}". Show the '
        "streaming availability (which services offer it for subscription, rent, or purchase) "
        "and the best torrent download options."
    )


def register_prompts(mcp):
    """Register prompt templates with FastMCP."""
    for fn in (presentation_guide, search_movie, search_show, whats_new, where_to_watch):
        mcp.prompt()(fn)
