"""
yt-dlp Library Metadata Fetcher

Infrastructure implementation of IMetadataFetcher using the yt_dlp
Python API in-process. Handles all yt-dlp specific error translation.
"""

from yt_dlp import YoutubeDL
from yt_dlp import utils as ytdlp_utils

from feedproxy.domain.errors import MetadataToolError, ToolFailure
from feedproxy.domain.video_metadata import IMetadataFetcher, VideoId, VideoRecord

from .ytdlp_info import read_dimensions


class YtDlpLibraryMetadataFetcher(IMetadataFetcher):
    """
    yt-dlp based implementation of metadata fetching without a subprocess.

    Extraction errors map to ``ToolFailure.FAILED``; an info dict without
    usable dimensions maps to ``ToolFailure.UNPARSABLE``.
    """

    METADATA_OPTS = {
        "quiet": True,
        "no_warnings": True,
        "skip_download": True,
        "noplaylist": True,
    }

    def fetch(self, video_id: str) -> VideoRecord:
        url = VideoId(video_id).watch_url
        try:
            with YoutubeDL(self.METADATA_OPTS) as ydl:
                info = ydl.extract_info(url, download=False)
        except ytdlp_utils.DownloadError as e:
            raise MetadataToolError(
                ToolFailure.FAILED,
                f"Failed to extract metadata for {video_id}: {e}",
                original_error=e,
            ) from e

        duration, width, height = read_dimensions(info, video_id)
        return VideoRecord.from_metadata(video_id, duration, width, height)
