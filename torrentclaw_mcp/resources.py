"""MCP resources for torrentclaw-mcp."""

from .core.http_client import TorrentClawClient

PRESENTATION_GUIDE = """# TorrentClaw Results Presentation Guide

## Critical Requirements

When presenting torrent search results to users, follow these practices to make results
actionable and user-friendly.

### 1. Clickable Magnet Links

**ALWAYS** make magnet links clickable using markdown format:

- [📥 Download](magnet:?xt=urn:btih:41159dc60579839533e04796df0e96bfa4864cb4&...)
- [🧲 Magnet](magnet:?xt=urn:btih:41159dc60579839533e04796df0e96bfa4864cb4&...)

Never show a bare magnet URI or only the info hash.

### 2. Content URL for Browsing

**ALWAYS** include the TorrentClaw content URL so users can explore all seasons and episodes:

[🔗 View all seasons and episodes on TorrentClaw](https://torrentclaw.com/shows/entrevias-2022-91260)

### 3. User-Friendly Presentation Format

**For TV shows** (especially when searching by season):

```markdown
### Entrevías - Temporada 4

**Episodio 1** (S04E01)
- 720p HDTV • 879 MB • 6 seeders • [📥 Download](magnet:?xt=urn:btih:...)

**Episodio 2** (S04E02)
- 1080p WEB-DL • 2.5 GB • 0 seeders ⚠️ No active seeders • [📥 Download](magnet:?xt=urn:btih:...)

[🔗 View all seasons on TorrentClaw](https://torrentclaw.com/shows/...)
```

**For movies**:

```markdown
### Inception (2010)
IMDb: 8.8 | TMDB: 8.4

1. **2160p BluRay** • 15.2 GB • 147 seeders • [📥 Download](magnet:?xt=...)
2. **1080p BluRay** • 2.0 GB • 847 seeders ⭐ Recommended • [📥 Download](magnet:?xt=...)

[🔗 View on TorrentClaw](https://torrentclaw.com/movies/...)
```

### 4. Helpful User Guidance

- Recommend torrents with the most seeders
- Warn when torrents have 0 seeders: "⚠️ No active seeders"
- Mark the best option: "⭐ Recommended" (seeders + quality)
- Suggest alternatives if the requested season has no seeders

### 5. What NOT to Do

- Never present results in plain text tables without clickable links
- Never show truncated magnet links
- Never omit the content URL
- Never present results without the seeder count
"""


def register_resources(mcp, client: TorrentClawClient):
    """Register resources with FastMCP."""

    def stats() -> str:
        """
        TorrentClaw catalog statistics as JSON: content counts (movies, shows,
        TMDB-enriched), torrent counts (total, with seeders, by source) and recent
        ingestion history.
        """
        return client.get_stats().model_dump_json(by_alias=True, indent=2)

    def presentation_guide() -> str:
        """Best practices for presenting torrent search results to users."""
        return PRESENTATION_GUIDE

    mcp.resource("torrentclaw://stats", name="stats", mime_type="application/json")(stats)
    mcp.resource("torrentclaw://presentation-guide", name="presentation-guide",
                 mime_type="text/markdown")(presentation_guide)
