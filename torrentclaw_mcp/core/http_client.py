"""HTTP client for the TorrentClaw API: caching, 429 retry and error mapping."""

import logging
import time
import urllib.parse
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from ..config import Settings, validate_api_url
from ..models.types import (
    AutocompleteResponse,
    CreditsResponse,
    PopularResponse,
    RecentResponse,
    ScanRequestResponse,
    SearchParams,
    SearchResponse,
    StatsResponse,
    TrackResponse,
    WatchProvidersResponse,
)
from .cache import ResponseCache

logger = logging.getLogger(__name__)

# Constants
MAX_RETRIES = 2  # 3 attempts total
BACKOFF_BASE = 1.0
BACKOFF_MAX = 10.0
ERROR_BODY_LIMIT = 200
SOURCE_TAG = "mcp"

API_ERROR_MESSAGES = {
    400: "Bad request — check that all parameters are valid.",
    401: "API key required or invalid. Set TORRENTCLAW_API_KEY environment variable.",
    403: "Insufficient API tier or endpoint not allowed for this key.",
    404: "Not found — the requested content ID does not exist. Use search_content to find valid IDs.",
    429: "Rate limit exceeded. Wait 10-30 seconds before retrying.",
    500: "TorrentClaw server error. Try again in a moment.",
    502: "TorrentClaw is temporarily unavailable. Try again in a moment.",
    503: "TorrentClaw is under maintenance. Try again later.",
}

M = TypeVar("M", bound=BaseModel)


class TorrentClawError(Exception):
    """Base class for client failures."""


class ApiError(TorrentClawError):
    """Non-2xx response from the API, after retries."""

    def __init__(self, status: int, body: str = ""):
        self.status = status
        self.body = body
        super().__init__(API_ERROR_MESSAGES.get(status, f"API request failed with status {status}"))


class TransportError(TorrentClawError):
    """Timeout, DNS failure, refused connection and similar."""


class DecodeError(TorrentClawError):
    """Response body is not JSON or does not match the expected shape."""


def backoff_delay(attempt: int) -> float:
    return min(BACKOFF_BASE * 2 ** attempt, BACKOFF_MAX)


def _param_str(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def err_text(exc: BaseException) -> str:
    """User-facing text for a failed tool call."""
    if isinstance(exc, ApiError):
        return f"TorrentClaw API error ({exc.status}): {exc}"
    return f"Request failed: {str(exc) or 'Unknown error'}"


class TorrentClawClient:
    """
    Client for the TorrentClaw REST API.

    GET responses are decoded, then cached by their full URL; POST requests
    are never cached. Only HTTP 429 is retried.
    """

    def __init__(self, settings: Optional[Settings] = None, cache: Optional[ResponseCache] = None):
        settings = settings or Settings()
        self.base_url = validate_api_url(settings.api_url, allow_private=settings.allow_private)
        self.api_key = settings.api_key
        self.user_agent = settings.user_agent
        self.timeout = settings.timeout
        self.cache = cache if cache is not None else ResponseCache(settings.cache_ttl, settings.cache_max_size)

    def _headers(self) -> Dict[str, str]:
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
            "X-Search-Source": SOURCE_TAG,
        }
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def build_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Resolve `path` against the base URL, dropping params that are None."""
        url = urllib.parse.urljoin(self.base_url, path)
        query = [(k, _param_str(v)) for k, v in (params or {}).items() if v is not None]
        if query:
            url += "?" + urllib.parse.urlencode(query)
        return url

    def _send(self, method: str, url: str, **kw) -> requests.Response:
        try:
            return requests.request(method, url, timeout=self.timeout, **kw)
        except requests.RequestException as e:
            raise TransportError(str(e) or type(e).__name__) from e

    def _fetch_with_retry(self, method: str, url: str, **kw) -> requests.Response:
        for attempt in range(MAX_RETRIES + 1):
            r = self._send(method, url, **kw)
            if r.status_code != 429:
                return r
            if attempt < MAX_RETRIES:
                delay = backoff_delay(attempt)
                logger.warning("429 from %s, retrying in %.1fs (attempt %d/%d)",
                               url, delay, attempt + 1, MAX_RETRIES + 1)
                time.sleep(delay)
        return r

    @staticmethod
    def _raise_for_status(r: requests.Response) -> None:
        if 200 <= r.status_code < 300:
            return
        # 5xx bodies stay server-side
        body = r.text[:ERROR_BODY_LIMIT] if 400 <= r.status_code < 500 else ""
        raise ApiError(r.status_code, body)

    @staticmethod
    def _decode(r: requests.Response, model: Optional[Type[M]]) -> Any:
        try:
            payload = r.json()
        except ValueError as e:
            raise DecodeError(f"Invalid JSON response: {e}") from e
        if model is None:
            return payload
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            raise DecodeError(f"Unexpected {model.__name__} payload: {e}") from e

    def request(self, path: str, params: Optional[Mapping[str, Any]] = None,
                model: Optional[Type[M]] = None) -> Any:
        """GET `path`, served from the cache when possible."""
        url = self.build_url(path, params)
        cached = self.cache.get(url)
        if cached is not None:
            logger.debug("cache hit: %s", url)
            return cached
        logger.debug("cache miss: %s", url)

        r = self._fetch_with_retry("GET", url, headers=self._headers())
        self._raise_for_status(r)
        data = self._decode(r, model)
        self.cache.set(url, data)
        return data

    def post_request(self, path: str, body: Dict[str, Any],
                     model: Optional[Type[M]] = None) -> Any:
        """POST a JSON body to `path`. Never cached."""
        url = self.build_url(path)
        headers = {**self._headers(), "Content-Type": "application/json"}
        r = self._fetch_with_retry("POST", url, headers=headers, json=body)
        self._raise_for_status(r)
        return self._decode(r, model)

    # ---------- Endpoints ----------

    def search(self, params: SearchParams) -> SearchResponse:
        return self.request("/api/v1/search", {
            "q": params.query,
            "type": params.type,
            "genre": params.genre,
            "year_min": params.year_min,
            "year_max": params.year_max,
            "min_rating": params.min_rating,
            "quality": params.quality,
            "lang": params.language,
            "audio": params.audio,
            "hdr": params.hdr,
            "availability": params.availability,
            "locale": params.locale,
            "season": params.season,
            "episode": params.episode,
            "sort": params.sort,
            "page": params.page,
            "limit": params.limit,
            "country": params.country,
        }, model=SearchResponse)

    def autocomplete(self, query: str) -> AutocompleteResponse:
        return self.request("/api/v1/autocomplete", {"q": query}, model=AutocompleteResponse)

    def get_popular(self, limit: Optional[int] = None, page: Optional[int] = None,
                    locale: Optional[str] = None) -> PopularResponse:
        return self.request("/api/v1/popular", {"limit": limit, "page": page, "locale": locale},
                            model=PopularResponse)

    def get_recent(self, limit: Optional[int] = None, page: Optional[int] = None,
                   locale: Optional[str] = None) -> RecentResponse:
        return self.request("/api/v1/recent", {"limit": limit, "page": page, "locale": locale},
                            model=RecentResponse)

    def get_watch_providers(self, content_id: int, country: str) -> WatchProvidersResponse:
        return self.request(f"/api/v1/content/{content_id}/watch-providers", {"country": country},
                            model=WatchProvidersResponse)

    def get_credits(self, content_id: int) -> CreditsResponse:
        return self.request(f"/api/v1/content/{content_id}/credits", model=CreditsResponse)

    def get_stats(self) -> StatsResponse:
        return self.request("/api/v1/stats", model=StatsResponse)

    def track(self, info_hash: str, action: str) -> TrackResponse:
        return self.post_request("/api/v1/track", {"infoHash": info_hash, "action": action},
                                 model=TrackResponse)

    def submit_scan_request(self, info_hash: str, email: str) -> ScanRequestResponse:
        # "website" is a spam trap upstream and must be sent empty
        return self.post_request("/api/v1/scan-request",
                                 {"infoHash": info_hash, "email": email, "website": ""},
                                 model=ScanRequestResponse)

    def get_scan_status(self, info_hash: str) -> ScanRequestResponse:
        return self.request(f"/api/v1/scan-request/{info_hash}", model=ScanRequestResponse)

    def get_torrent_download_url(self, info_hash: str) -> str:
        return self.build_url(f"/api/v1/torrent/{info_hash}")
