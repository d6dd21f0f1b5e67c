"""
Metadata Fetcher Factory

Creates the IMetadataFetcher implementation selected in the configuration.
"""

import logging

from feedproxy.config.settings import ProxyConfig
from feedproxy.domain.video_metadata import IMetadataFetcher

from .ytdlp_cli_fetcher import YtDlpCliMetadataFetcher
from .ytdlp_library_fetcher import YtDlpLibraryMetadataFetcher

logger = logging.getLogger(__name__)


class MetadataFetcherFactory:
    """Factory that returns the yt-dlp fetcher for the configured backend."""

    @staticmethod
    def create_fetcher(config: ProxyConfig) -> IMetadataFetcher:
        """
        Create the metadata fetcher.

        ``cli`` runs the yt-dlp executable, ``library`` calls yt_dlp
        in-process.
        """
        if config.metadata_backend == "library":
            logger.info("Metadata backend: yt_dlp library")
            return YtDlpLibraryMetadataFetcher()

        fetcher = YtDlpCliMetadataFetcher(executable=config.ytdlp_path, extra_args=config.ytdlp_args)
        if not fetcher.is_available():
            # Not fatal: every request that needs metadata will fail instead
            logger.warning("yt-dlp executable %r not found on PATH", config.ytdlp_path)
        logger.info("Metadata backend: %s", config.ytdlp_path)
        return fetcher
