"""Helper functions for torrentclaw-mcp."""

from typing import Iterable, List, Optional


def season_tag(season: int, episode: Optional[int] = None) -> str:
    """S04E01 style tag; the episode part is omitted when absent."""
    ep = f"E{episode:02d}" if episode is not None else ""
    return f"S{season:02d}{ep}"


def truncate(text: str, limit: int) -> str:
    if len(text) <= limit:
        return text
    return text[:limit - 3] + "..."


def unique(values: Iterable[str]) -> List[str]:
    """Drop duplicates, keeping first-seen order."""
    return list(dict.fromkeys(values))
