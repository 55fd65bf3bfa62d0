import pytest

from torrentclaw_mcp.config import ConfigError, Settings, validate_api_url


@pytest.mark.parametrize("url", [
    "https://torrentclaw.com",
    "http://api.example.com",
    "http://172.15.0.1",
    "http://172.32.0.1",
    "https://8.8.8.8/base/path?x=1",
])
def test_accepts_public_urls_unchanged(url):
    assert validate_api_url(url) == url


def test_rejects_unparseable_url():
    with pytest.raises(ConfigError, match="not a valid URL"):
        validate_api_url("not-a-url")


def test_rejects_url_without_host():
    with pytest.raises(ConfigError, match="not a valid URL"):
        validate_api_url("http://")


@pytest.mark.parametrize("url", ["ftp://example.com", "file:///etc/passwd", "javascript:alert(1)"])
def test_rejects_other_schemes(url):
    with pytest.raises(ConfigError, match="only http/https"):
        validate_api_url(url)


@pytest.mark.parametrize("url", [
    "http://localhost:3030",
    "http://LOCALHOST",
    "http://127.0.0.1",
    "http://127.10.20.30:8080",
    "http://0.0.0.0",
    "http://10.0.0.1",
    "http://172.16.0.1",
    "http://172.31.255.255",
    "http://192.168.1.1",
    "http://169.254.169.254",
    "http://[::1]",
    "http://[::]:8080",
])
def test_rejects_private_and_reserved_hosts(url):
    with pytest.raises(ConfigError, match="private/reserved"):
        validate_api_url(url)


def test_allow_private_override():
    assert validate_api_url("http://192.168.1.10:3000", allow_private=True) == "http://192.168.1.10:3000"
    with pytest.raises(ConfigError, match="only http/https"):
        validate_api_url("ftp://192.168.1.10", allow_private=True)


def test_allow_private_override_is_logged(caplog):
    with caplog.at_level("WARNING", logger="torrentclaw_mcp.config"):
        validate_api_url("http://10.0.0.5", allow_private=True)
        validate_api_url("https://torrentclaw.com", allow_private=True)
    assert len(caplog.records) == 1
    assert "http://10.0.0.5" in caplog.records[0].getMessage()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("TORRENTCLAW_API_URL", "https://mirror.example.org")
    monkeypatch.setenv("TORRENTCLAW_API_KEY", "k")
    monkeypatch.setenv("TORRENTCLAW_ALLOW_PRIVATE", "true")
    monkeypatch.setenv("TORRENTCLAW_CACHE_TTL", "60")

    s = Settings()
    assert s.api_url == "https://mirror.example.org"
    assert s.api_key == "k"
    assert s.allow_private is True
    assert s.cache_ttl == 60
    assert s.cache_max_size == 200
    assert s.user_agent.startswith("torrentclaw-mcp/")


def test_settings_defaults(monkeypatch):
    for var in ("TORRENTCLAW_API_URL", "TORRENTCLAW_API_KEY", "TORRENTCLAW_ALLOW_PRIVATE"):
        monkeypatch.delenv(var, raising=False)
    s = Settings()
    assert s.api_url == "https://torrentclaw.com"
    assert s.api_key is None
    assert s.allow_private is False
    assert s.timeout == 15
