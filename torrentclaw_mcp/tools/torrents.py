"""Per-torrent tools: .torrent URL, interaction tracking and media scans."""

import logging
from typing import Annotated, Literal

from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from ..core.http_client import TorrentClawClient, err_text

logger = logging.getLogger(__name__)

InfoHash = Annotated[str, Field(
    pattern=r"^[a-fA-F0-9]{40}$", description="40-character hex torrent info_hash from search_content results")]


def register_tools(mcp, client: TorrentClawClient):
    """Register torrent tools with FastMCP."""

    def get_torrent_url(info_hash: InfoHash) -> str:
        """
        Direct .torrent file download URL for an info_hash. Use when the user wants a
        .torrent file rather than a magnet link.
        """
        return f"Download .torrent file: {client.get_torrent_download_url(info_hash.lower())}"

    def track_interaction(
        info_hash: InfoHash,
        action: Annotated[Literal["magnet", "torrent_download", "copy"], Field(
            description="'magnet' (clicked magnet link), 'torrent_download' (downloaded .torrent "
                        "file), 'copy' (copied info hash or magnet)")],
    ) -> str:
        """
        Record a user interaction with a torrent, to keep popularity stats accurate. Call
        after presenting a magnet link or torrent URL that the user used.
        """
        h = info_hash.lower()
        try:
            client.track(h, action)
        except Exception as e:
            logger.warning("track_interaction failed: %s", e)
            raise ToolError(err_text(e)) from e
        return f"Tracked {action} for {h}."

    def submit_scan_request(
        info_hash: InfoHash,
        email: Annotated[str, Field(
            max_length=200, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
            description="Email address for scan completion notification")],
    ) -> str:
        """
        Submit a torrent for audio/video analysis (codec, tracks, resolution, HDR). Results
        are not instant: use get_scan_status to check progress. Rate limited to 5 requests
        per hour.
        """
        h = info_hash.lower()
        try:
            data = client.submit_scan_request(h, email)
        except Exception as e:
            logger.warning("submit_scan_request failed: %s", e)
            raise ToolError(err_text(e)) from e
        return (f"Scan request submitted for {h}.\nStatus: {data.status}\n"
                f'Use get_scan_status(info_hash="{h}") to check progress.')

    def get_scan_status(info_hash: InfoHash) -> str:
        """Status of a torrent scan request (pending, scanning, completed, failed)."""
        h = info_hash.lower()
        try:
            data = client.get_scan_status(h)
        except Exception as e:
            logger.warning("get_scan_status failed: %s", e)
            raise ToolError(err_text(e)) from e

        lines = [f"Scan status for {h}:", f"  Status: {data.status}"]
        if data.source:
            lines.append(f"  Source: {data.source}")
        if data.created_at:
            lines.append(f"  Submitted: {data.created_at}")
        if data.completed_at:
            lines.append(f"  Completed: {data.completed_at}")
        return "\n".join(lines)

    mcp.tool()(get_torrent_url)
    mcp.tool()(track_interaction)
    mcp.tool()(submit_scan_request)
    mcp.tool()(get_scan_status)
