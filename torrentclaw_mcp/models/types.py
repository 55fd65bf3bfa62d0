"""Type definitions for TorrentClaw API requests and responses."""

from datetime import datetime
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for API payloads: camelCase on the wire, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )


class SearchParams(BaseModel):
    """Normalized search parameter bag, one per request."""

    model_config = ConfigDict(frozen=True)

    query: str
    type: Optional[str] = None          # movie/show
    genre: Optional[str] = None
    year_min: Optional[int] = None
    year_max: Optional[int] = None
    min_rating: Optional[float] = None
    quality: Optional[str] = None       # 480p/720p/1080p/2160p
    language: Optional[str] = None
    audio: Optional[str] = None
    hdr: Optional[str] = None
    availability: Optional[str] = None
    locale: Optional[str] = None
    season: Optional[int] = None
    episode: Optional[int] = None
    sort: Optional[str] = None
    page: Optional[int] = None
    limit: Optional[int] = None
    country: Optional[str] = None


# ---------- Torrents ----------

class AudioTrack(ApiModel):
    lang: Optional[str] = None
    codec: Optional[str] = None
    channels: Optional[str] = None
    title: Optional[str] = None
    default: Optional[bool] = None


class SubtitleTrack(ApiModel):
    lang: Optional[str] = None
    codec: Optional[str] = None
    title: Optional[str] = None
    forced: Optional[bool] = None


class VideoInfo(ApiModel):
    codec: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    bit_depth: Optional[int] = None
    hdr: Optional[str] = None
    frame_rate: Optional[str] = None


class TorrentInfo(ApiModel):
    info_hash: str = Field(pattern=r"^[0-9a-fA-F]{40}$")
    raw_title: Optional[str] = None
    quality: Optional[str] = None
    codec: Optional[str] = None
    source_type: Optional[str] = None
    size_bytes: Optional[Union[str, int]] = None
    seeders: int = 0
    leechers: int = 0
    magnet_url: Optional[str] = None
    torrent_url: Optional[str] = None
    source: Optional[str] = None
    quality_score: Optional[Union[int, float]] = None
    uploaded_at: Optional[str] = None
    languages: List[str] = []
    audio_codec: Optional[str] = None
    hdr_type: Optional[str] = None
    release_group: Optional[str] = None
    is_proper: Optional[bool] = None
    is_repack: Optional[bool] = None
    is_remastered: Optional[bool] = None
    season: Optional[int] = None
    episode: Optional[int] = None
    audio_tracks: Optional[List[AudioTrack]] = None
    subtitle_tracks: Optional[List[SubtitleTrack]] = None
    video_info: Optional[VideoInfo] = None
    scan_status: Optional[str] = None


# ---------- Content ----------

class StreamingProviderItem(ApiModel):
    provider_id: Optional[int] = None
    name: str
    logo: Optional[str] = None
    link: Optional[str] = None


class StreamingInfo(ApiModel):
    flatrate: List[StreamingProviderItem] = []
    rent: List[StreamingProviderItem] = []
    buy: List[StreamingProviderItem] = []
    free: List[StreamingProviderItem] = []


class SearchResult(ApiModel):
    id: int
    imdb_id: Optional[str] = None
    tmdb_id: Optional[str] = None
    content_type: str
    title: str
    title_original: Optional[str] = None
    year: Optional[int] = None
    overview: Optional[str] = None
    poster_url: Optional[str] = None
    backdrop_url: Optional[str] = None
    genres: Optional[List[str]] = None
    rating_imdb: Optional[str] = None
    rating_tmdb: Optional[str] = None
    content_url: Optional[str] = None
    has_torrents: bool = False
    torrents: List[TorrentInfo] = []
    streaming: Optional[StreamingInfo] = None


class SearchResponse(ApiModel):
    total: int
    page: int
    page_size: int
    parsed_season: Optional[int] = None
    parsed_episode: Optional[int] = None
    results: List[SearchResult] = []


class AutocompleteItem(ApiModel):
    id: int
    title: str
    year: Optional[int] = None
    content_type: str
    poster_url: Optional[str] = None


class AutocompleteResponse(ApiModel):
    suggestions: List[AutocompleteItem] = []


class PopularItem(ApiModel):
    id: int
    title: str
    year: Optional[int] = None
    content_type: str
    poster_url: Optional[str] = None
    rating_imdb: Optional[str] = None
    rating_tmdb: Optional[str] = None
    click_count: int = 0


class PopularResponse(ApiModel):
    items: List[PopularItem] = []
    total: int
    page: int
    page_size: int


class RecentItem(ApiModel):
    id: int
    title: str
    year: Optional[int] = None
    content_type: str
    poster_url: Optional[str] = None
    rating_imdb: Optional[str] = None
    rating_tmdb: Optional[str] = None
    created_at: datetime


class RecentResponse(ApiModel):
    items: List[RecentItem] = []
    total: int
    page: int
    page_size: int


# ---------- Credits & providers ----------

class CastMember(ApiModel):
    name: str
    character: Optional[str] = None
    profile_url: Optional[str] = None


class CreditsResponse(ApiModel):
    content_id: int
    director: Optional[str] = None
    cast: List[CastMember] = []


class WatchProviderItem(ApiModel):
    provider_id: Optional[int] = None
    name: str
    logo: Optional[str] = None
    link: Optional[str] = None
    display_priority: int = 0


class WatchProviders(ApiModel):
    flatrate: List[WatchProviderItem] = []
    rent: List[WatchProviderItem] = []
    buy: List[WatchProviderItem] = []
    free: List[WatchProviderItem] = []


class VpnSuggestion(ApiModel):
    available_in: List[str] = []
    affiliate_url: Optional[str] = None


class WatchProvidersResponse(ApiModel):
    content_id: int
    country: str
    providers: WatchProviders = WatchProviders()
    vpn_suggestion: Optional[VpnSuggestion] = None
    attribution: str = ""


# ---------- Stats, tracking, scans ----------

class ContentStats(ApiModel):
    movies: int = 0
    shows: int = 0
    tmdb_enriched: int = 0


class TorrentStats(ApiModel):
    total: int = 0
    with_seeders: int = 0
    by_source: Dict[str, int] = {}


class IngestionRun(ApiModel):
    source: str
    status: str
    started_at: str
    completed_at: Optional[str] = None
    fetched: int = 0
    new: int = 0
    updated: int = 0


class StatsResponse(ApiModel):
    content: ContentStats
    torrents: TorrentStats
    recent_ingestions: List[IngestionRun] = []


class TrackResponse(ApiModel):
    ok: bool


class ScanRequestResponse(ApiModel):
    status: str
    source: Optional[str] = None
    created_at: Optional[str] = None
    completed_at: Optional[str] = None
