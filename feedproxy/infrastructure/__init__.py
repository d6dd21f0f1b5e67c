"""
Infrastructure Layer

Adapters for yt-dlp, the snapshot file and the upstream feed.
"""

from .json_snapshot_file import JsonSnapshotFile
from .youtube_feed_client import YouTubeFeedClient
from .ytdlp_cli_fetcher import YtDlpCliMetadataFetcher

__all__ = [
    "JsonSnapshotFile",
    "YouTubeFeedClient",
    "YtDlpCliMetadataFetcher",
]
