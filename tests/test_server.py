import asyncio

import pytest

from torrentclaw_mcp import server
from torrentclaw_mcp.config import Settings


def test_create_app_registers_everything(client):
    app = server.create_app(client=client)
    names = {t.name for t in asyncio.run(app.list_tools())}
    assert {"search_content", "autocomplete", "get_popular", "get_recent", "get_watch_providers",
            "get_credits", "get_torrent_url", "track_interaction", "submit_scan_request",
            "get_scan_status", "cache_info", "cache_clear"} <= names

    uris = {str(r.uri) for r in asyncio.run(app.list_resources())}
    assert {"torrentclaw://stats", "torrentclaw://presentation-guide"} <= uris

    prompts = {p.name for p in asyncio.run(app.list_prompts())}
    assert {"search_movie", "search_show", "whats_new", "where_to_watch"} <= prompts


def test_main_exits_on_bad_api_url(monkeypatch):
    monkeypatch.setenv("TORRENTCLAW_API_URL", "ftp://example.com")
    with pytest.raises(SystemExit) as ei:
        server.main()
    assert ei.value.code == 1


def test_create_app_builds_client_from_settings():
    app = server.create_app(Settings(api_url="https://api.example.com"))
    assert app.name == "torrentclaw"
