"""Configuration and API URL validation for torrentclaw-mcp."""

import ipaddress
import logging
from importlib.metadata import version, PackageNotFoundError
from typing import Optional
from urllib.parse import urlsplit

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

try:
    __VERSION__ = version("torrentclaw-mcp")
except PackageNotFoundError:
    __VERSION__ = "0.0.0+dev"

DEFAULT_API_URL = "https://torrentclaw.com"

# 169.254/16 covers link-local and cloud metadata endpoints
_BLOCKED_NETWORKS = [
    ipaddress.ip_network("127.0.0.0/8"),
    ipaddress.ip_network("0.0.0.0/32"),
    ipaddress.ip_network("10.0.0.0/8"),
    ipaddress.ip_network("172.16.0.0/12"),
    ipaddress.ip_network("192.168.0.0/16"),
    ipaddress.ip_network("169.254.0.0/16"),
    ipaddress.ip_network("::1/128"),
    ipaddress.ip_network("::/128"),
]


class ConfigError(Exception):
    """Invalid or disallowed configuration, raised at startup."""


def _is_blocked_host(hostname: str) -> bool:
    host = hostname.strip("[]")
    if host.lower() == "localhost":
        return True
    try:
        addr = ipaddress.ip_address(host)
    except ValueError:
        return False
    return any(addr in net for net in _BLOCKED_NETWORKS if addr.version == net.version)


def validate_api_url(raw: str, allow_private: bool = False) -> str:
    """
    Check that `raw` is an http(s) URL that does not point into a private or
    reserved network. Returns `raw` unchanged.

    allow_private: opt-in for self-hosted deployments on a local network.
    """
    try:
        parts = urlsplit(raw)
        hostname = parts.hostname
        parts.port  # raises on a malformed port
    except ValueError:
        raise ConfigError("Invalid TORRENTCLAW_API_URL: not a valid URL") from None

    if not parts.scheme:
        raise ConfigError("Invalid TORRENTCLAW_API_URL: not a valid URL")
    if parts.scheme.lower() not in ("http", "https"):
        raise ConfigError("Invalid TORRENTCLAW_API_URL: only http/https protocols allowed")
    if not hostname:
        raise ConfigError("Invalid TORRENTCLAW_API_URL: not a valid URL")

    if _is_blocked_host(hostname):
        if not allow_private:
            raise ConfigError(
                "Invalid TORRENTCLAW_API_URL: private/reserved addresses not allowed. "
                "Set TORRENTCLAW_ALLOW_PRIVATE=true for self-hosted setups."
            )
        logger.warning("API URL %s points at a private/reserved address (TORRENTCLAW_ALLOW_PRIVATE)",
                       raw)
    return raw


class Settings(BaseSettings):
    """Application settings loaded from TORRENTCLAW_* environment variables."""

    api_url: str = Field(default=DEFAULT_API_URL, description="TorrentClaw API origin")
    api_key: Optional[str] = Field(default=None, description="Bearer token for higher API tiers")
    allow_private: bool = Field(default=False, description="Allow private/reserved API hosts")

    cache_ttl: float = Field(default=300.0, ge=0, description="Response cache TTL in seconds")
    cache_max_size: int = Field(default=200, ge=0, description="Maximum cached responses")
    timeout: float = Field(default=15.0, gt=0, description="Per-attempt request timeout in seconds")

    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_prefix="TORRENTCLAW_",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def user_agent(self) -> str:
        return f"torrentclaw-mcp/{__VERSION__}"
