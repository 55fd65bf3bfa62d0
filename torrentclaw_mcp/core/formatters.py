"""Plain-text rendering of TorrentClaw API responses.

The text produced here is what MCP clients (and the LLM behind them) read, so
field order, section labels and count phrasing are kept stable.
"""

import re
from typing import Any, List, Optional, Sequence

from ..models.types import (
    CreditsResponse,
    PopularItem,
    PopularResponse,
    RecentItem,
    RecentResponse,
    SearchResponse,
    SearchResult,
    TorrentInfo,
    WatchProviderItem,
    WatchProvidersResponse,
)
from ..utils.helpers import season_tag, truncate, unique

TOP_TORRENTS = 5
OVERVIEW_LIMIT = 200
GB = 1024 ** 3
MB = 1024 ** 2
_LEADING_INT = re.compile(r"\s*[+-]?\d+")

NO_RESULTS = (
    "No results found. Try: (1) a shorter or alternate title, (2) removing filters like "
    "quality or year, (3) checking spelling. You can also try get_popular or get_recent "
    "to browse available content."
)
BROWSE_HINT = "(Use search_content with a title to get torrents and full details)"


def _num(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_size(size_bytes: Any) -> str:
    """
    Human size in GB/MB/KB from the leading integer of `size_bytes`
    ("1073741824.0" -> 1.0 GB); '?' when missing or not numeric.
    """
    if size_bytes is None:
        return "?"
    m = _LEADING_INT.match(str(size_bytes))
    if not m:
        return "?"
    b = int(m.group(0))
    if b >= GB:
        return f"{b / GB:.1f} GB"
    if b >= MB:
        return f"{b / MB:.0f} MB"
    return f"{b / 1024:.0f} KB"


def format_rating(imdb: Optional[str], tmdb: Optional[str]) -> str:
    parts = []
    if imdb:
        parts.append(f"IMDb: {imdb}")
    if tmdb:
        parts.append(f"TMDB: {tmdb}")
    return " | ".join(parts) if parts else "No ratings"


def quality_label(t: TorrentInfo) -> str:
    parts = [p for p in (t.quality, t.source_type, t.codec, t.hdr_type) if p]
    return " ".join(parts) if parts else "Unknown quality"


def compact_magnet(info_hash: str) -> str:
    return f"magnet:?xt=urn:btih:{info_hash.lower()}"


# ---------- Season/episode filter and top-N ----------

def filter_torrents(torrents: Sequence[TorrentInfo], season: Optional[int] = None,
                    episode: Optional[int] = None) -> List[TorrentInfo]:
    """
    Keep torrents tagged with `season` (and `episode`, when given alongside a
    season). Untagged packs never match an active filter; `episode` alone is
    ignored.
    """
    if season is None:
        return list(torrents)
    out = [t for t in torrents if t.season == season]
    if episode is not None:
        out = [t for t in out if t.episode == episode]
    return out


def top_torrents(torrents: Sequence[TorrentInfo], n: int = TOP_TORRENTS) -> List[TorrentInfo]:
    """Highest quality score first (missing = 0), ties in original order."""
    return sorted(torrents, key=lambda t: t.quality_score or 0, reverse=True)[:n]


# ---------- Search results ----------

def format_torrent(t: TorrentInfo, compact: bool = False) -> str:
    line = f"  - {quality_label(t)} ({format_size(t.size_bytes)}) | {t.seeders} seeders"
    if t.quality_score is not None:
        line += f" | Score: {_num(t.quality_score)}"
    if t.season is not None:
        line += f" | {season_tag(t.season, t.episode)}"

    line += f"\n    Info hash: {t.info_hash}"
    if compact:
        line += f"\n    Magnet: {compact_magnet(t.info_hash)}"
    elif t.magnet_url:
        line += f"\n    Magnet: {t.magnet_url}"
    if t.torrent_url:
        line += f"\n    Torrent: {t.torrent_url}"

    if t.audio_tracks:
        langs = unique(a.lang or "?" for a in t.audio_tracks)
        line += f"\n    Audio: {', '.join(langs)}"
        codecs = unique(a.codec for a in t.audio_tracks if a.codec)
        if codecs:
            line += f" ({', '.join(codecs)})"
    if t.subtitle_tracks:
        langs = unique(s.lang or "?" for s in t.subtitle_tracks)
        line += f"\n    Subtitles: {', '.join(langs)}"
    return line


def _torrent_section(r: SearchResult, compact: bool, season: Optional[int],
                     episode: Optional[int]) -> List[str]:
    total = len(r.torrents)
    if total == 0:
        return ["   No torrents available"]

    if season is None:
        top = top_torrents(r.torrents)
        heading = f"   Torrents ({total} total, top {len(top)}):"
        return [heading] + [format_torrent(t, compact) for t in top]

    matching = filter_torrents(r.torrents, season, episode)
    if not matching:
        if episode is None:
            return [f"   No torrents available for season {season} "
                    f"({total} torrents available for other seasons)"]
        return [f"   No torrents available for {season_tag(season, episode)} "
                f"({total} torrents available for other episodes)"]

    top = top_torrents(matching)
    heading = f"   Torrents ({len(matching)} matching, {total} total, top {len(top)}):"
    return [heading] + [format_torrent(t, compact) for t in top]


def format_result(r: SearchResult, index: int, compact: bool = False,
                  season: Optional[int] = None, episode: Optional[int] = None) -> str:
    year = f" ({r.year})" if r.year else ""
    lines = [f"{index}. {r.title}{year} [{r.content_type}]",
             f"   {format_rating(r.rating_imdb, r.rating_tmdb)}"]
    if r.genres:
        lines.append(f"   Genres: {', '.join(r.genres)}")
    if r.overview:
        lines.append(f"   {truncate(r.overview, OVERVIEW_LIMIT)}")

    lines.extend(_torrent_section(r, compact, season, episode))

    if r.streaming:
        providers = []
        if r.streaming.flatrate:
            providers.append(f"Stream: {', '.join(p.name for p in r.streaming.flatrate)}")
        if r.streaming.free:
            providers.append(f"Free: {', '.join(p.name for p in r.streaming.free)}")
        if providers:
            lines.append(f"   {' | '.join(providers)}")

    lines.append(f"   Content ID: {r.id} — use with get_watch_providers(content_id={r.id}) "
                 f"or get_credits(content_id={r.id})")
    if r.imdb_id:
        lines.append(f"   IMDb: {r.imdb_id}")
    if r.content_url:
        lines.append(f"   URL: {r.content_url}")
    return "\n".join(lines)


def format_search_results(data: SearchResponse, compact: bool = False,
                          season: Optional[int] = None, episode: Optional[int] = None) -> str:
    """
    Render a search response.

    compact: synthesize hash-only magnets instead of the upstream tracker-laden ones.
    season/episode: explicit filters applied to each result's torrents.
    """
    if not data.results:
        return NO_RESULTS

    header = [f"Found {data.total} results (page {data.page}, showing {len(data.results)}):"]
    if data.parsed_season is not None:
        header.append(f"Detected season/episode: {season_tag(data.parsed_season, data.parsed_episode)}")

    results = [format_result(r, i, compact, season, episode) for i, r in enumerate(data.results, 1)]
    return "\n".join(header + [""] + results)


# ---------- Popular / recent ----------

def _format_popular_item(item: PopularItem, index: int) -> str:
    year = f" ({item.year})" if item.year else ""
    rating = format_rating(item.rating_imdb, item.rating_tmdb)
    return (f"{index}. {item.title}{year} [{item.content_type}] — {rating} — "
            f"{item.click_count} clicks — ID: {item.id}")


def format_popular_results(data: PopularResponse) -> str:
    if not data.items:
        return "No popular content found."
    header = f"Popular content ({data.total} total, page {data.page}):"
    items = [_format_popular_item(item, i) for i, item in enumerate(data.items, 1)]
    return "\n".join([header, BROWSE_HINT, ""] + items)


def _format_recent_item(item: RecentItem, index: int) -> str:
    year = f" ({item.year})" if item.year else ""
    rating = format_rating(item.rating_imdb, item.rating_tmdb)
    d = item.created_at
    added = f"{d:%b} {d.day}, {d.year}"
    return (f"{index}. {item.title}{year} [{item.content_type}] — {rating} — "
            f"Added: {added} — ID: {item.id}")


def format_recent_results(data: RecentResponse) -> str:
    if not data.items:
        return "No recent content found."
    header = f"Recently added content ({data.total} total, page {data.page}):"
    items = [_format_recent_item(item, i) for i, item in enumerate(data.items, 1)]
    return "\n".join([header, BROWSE_HINT, ""] + items)


# ---------- Credits / watch providers ----------

def format_credits(data: CreditsResponse) -> str:
    lines = [f"Credits for content #{data.content_id}:", ""]
    if data.director:
        lines.append(f"  Director: {data.director}")
    if data.cast:
        lines.append("  Cast:")
        for member in data.cast:
            character = f" as {member.character}" if member.character else ""
            lines.append(f"    - {member.name}{character}")
    else:
        lines.append("  No cast information available.")
    return "\n".join(lines)


def _provider_list(label: str, providers: Sequence[WatchProviderItem]) -> Optional[str]:
    if not providers:
        return None
    names = [p.name for p in sorted(providers, key=lambda p: p.display_priority)]
    return f"  {label}: {', '.join(names)}"


def format_watch_providers(data: WatchProvidersResponse) -> str:
    lines = [f"Watch providers for content #{data.content_id} in {data.country}:", ""]

    p = data.providers
    sections = [s for s in (_provider_list("Stream", p.flatrate), _provider_list("Free", p.free),
                            _provider_list("Rent", p.rent), _provider_list("Buy", p.buy)) if s]
    if sections:
        lines.extend(sections)
    else:
        lines.append(f"  No watch providers found in {data.country}.")

    if data.vpn_suggestion:
        lines.append("")
        lines.append(f"  Available in other countries: {', '.join(data.vpn_suggestion.available_in)}")

    lines.append("")
    lines.append(data.attribution)
    return "\n".join(lines)
