"""
yt-dlp CLI Metadata Fetcher

Infrastructure implementation of IMetadataFetcher that runs the yt-dlp
executable and reads the JSON it prints.
"""

import json
import logging
import shutil
import subprocess
from typing import List, Optional

from feedproxy.domain.errors import MetadataToolError, ToolFailure
from feedproxy.domain.video_metadata import IMetadataFetcher, VideoId, VideoRecord

from .ytdlp_info import read_dimensions

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "yt-dlp"


class YtDlpCliMetadataFetcher(IMetadataFetcher):
    """
    Runs ``yt-dlp --dump-json`` for one video at a time.

    The process blocks the calling worker until it exits. A non-zero exit
    status is a failure even if some JSON was printed before it.
    """

    BASE_ARGS = ["--dump-json", "--no-warnings", "--skip-download"]

    def __init__(self, executable: str = DEFAULT_EXECUTABLE, extra_args: Optional[List[str]] = None):
        """
        Args:
            executable: Name on PATH or path of the yt-dlp executable
            extra_args: Additional command line arguments, e.g. ``--cookies``
        """
        self.executable = executable
        self.extra_args = list(extra_args or [])

    def is_available(self) -> bool:
        """Check whether the executable can be found."""
        return shutil.which(self.executable) is not None

    def build_command(self, video_id: str) -> List[str]:
        url = VideoId(video_id).watch_url
        return [self.executable, *self.BASE_ARGS, *self.extra_args, url]

    def fetch(self, video_id: str) -> VideoRecord:
        command = self.build_command(video_id)
        logger.debug("Running %s", " ".join(command))

        try:
            completed = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as e:
            raise MetadataToolError(
                ToolFailure.UNAVAILABLE,
                f"Could not start {self.executable}: {e}",
                original_error=e,
            ) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            detail = stderr.splitlines()[-1] if stderr else "no error output"
            raise MetadataToolError(
                ToolFailure.FAILED,
                f"{self.executable} returned non-zero exit status {completed.returncode} "
                f"for {video_id}: {detail}",
            )

        try:
            info = json.loads(completed.stdout)
        except (ValueError, UnicodeDecodeError) as e:
            raise MetadataToolError(
                ToolFailure.UNPARSABLE,
                f"Could not parse {self.executable} output for {video_id}: {e}",
                original_error=e,
            ) from e

        duration, width, height = read_dimensions(info, video_id)
        return VideoRecord.from_metadata(video_id, duration, width, height)
