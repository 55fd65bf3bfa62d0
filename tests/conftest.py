import json
import types

import pytest

from torrentclaw_mcp.config import Settings
from torrentclaw_mcp.core import http_client as hc
from torrentclaw_mcp.models.types import SearchResponse, TorrentInfo

HASH = "aaf1e71c0a0e3b1c0f1a2b3c4d5e6f7a8b9c0d1e"


class DummyResponse:
    def __init__(self, status_code=200, json_data=None, text=None):
        self.status_code = status_code
        self._json = json_data
        self.text = text if text is not None else json.dumps(json_data)

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json


class FakeMCP:
    """Records what register_* functions hand to FastMCP."""

    def __init__(self):
        self.tools = {}
        self.resources = {}
        self.prompts = {}

    def tool(self, **kw):
        def deco(fn):
            self.tools[fn.__name__] = fn
            return fn
        return deco

    def resource(self, uri, **kw):
        def deco(fn):
            self.resources[uri] = fn
            return fn
        return deco

    def prompt(self, **kw):
        def deco(fn):
            self.prompts[fn.__name__] = fn
            return fn
        return deco


def make_torrent(season=None, episode=None, score=None, info_hash=HASH, **kw):
    data = {
        "infoHash": info_hash,
        "quality": "1080p",
        "codec": "x264",
        "sourceType": "WEB-DL",
        "sizeBytes": "1073741824",
        "seeders": 10,
        "leechers": 1,
        "magnetUrl": f"magnet:?xt=urn:btih:{info_hash}&tr=udp://tracker.example.com:80",
        "qualityScore": score,
        "season": season,
        "episode": episode,
    }
    data.update(kw)
    return TorrentInfo.model_validate(data)


def make_response(torrents=(), **kw):
    result = {
        "id": 1,
        "imdbId": "tt1234567",
        "contentType": "show",
        "title": "Test Show",
        "year": 2024,
        "genres": ["Drama"],
        "ratingImdb": "8.5",
        "ratingTmdb": "8.2",
        "contentUrl": "https://torrentclaw.com/shows/test-show-1",
        "hasTorrents": bool(torrents),
        "torrents": [t.model_dump(by_alias=True) for t in torrents],
    }
    result.update(kw)
    return SearchResponse.model_validate({"total": 1, "page": 1, "pageSize": 10, "results": [result]})


@pytest.fixture
def settings():
    return Settings(api_url="https://torrentclaw.com", api_key=None)


@pytest.fixture
def client(settings):
    return hc.TorrentClawClient(settings)


@pytest.fixture
def no_sleep(monkeypatch):
    delays = []
    monkeypatch.setattr(hc, "time", types.SimpleNamespace(sleep=delays.append))
    return delays


@pytest.fixture
def fake_requests(monkeypatch):
    """Queue of responses served by requests.request; records each call."""

    class Fake:
        def __init__(self):
            self.responses = []
            self.calls = []

        def __call__(self, method, url, timeout=None, headers=None, **kw):
            self.calls.append({"method": method, "url": url, "timeout": timeout,
                               "headers": headers, **kw})
            r = self.responses.pop(0)
            if isinstance(r, Exception):
                raise r
            return r

        def add(self, json_data=None, status=200, text=None):
            self.responses.append(DummyResponse(status, json_data, text))

    fake = Fake()
    monkeypatch.setattr(hc.requests, "request", fake)
    return fake
