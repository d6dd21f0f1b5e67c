"""
YouTube Feed Client

Infrastructure implementation of IFeedClient over HTTP with requests.
"""

import logging
from typing import Optional

import requests

from feedproxy.domain.errors import UpstreamFetchError
from feedproxy.domain.feed import IFeedClient

logger = logging.getLogger(__name__)

DEFAULT_FEED_URL = "https://www.youtube.com/feeds/videos.xml"


class YouTubeFeedClient(IFeedClient):
    """
    Fetches ``videos.xml?channel_id=...`` from YouTube.

    One attempt per call; failures surface as UpstreamFetchError.
    """

    def __init__(
        self,
        feed_url: str = DEFAULT_FEED_URL,
        timeout: Optional[float] = 30.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            feed_url: Upstream feed endpoint
            timeout: Seconds before giving up on the upstream, None to wait forever
            session: Shared requests session, a new one if omitted
        """
        self.feed_url = feed_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def fetch_feed(self, channel_id: str) -> bytes:
        try:
            response = self.session.get(
                self.feed_url,
                params={"channel_id": channel_id},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamFetchError(
                f"Failed to fetch feed for channel {channel_id}: {e}",
                original_error=e,
            ) from e

        if not 200 <= response.status_code < 300:
            raise UpstreamFetchError(
                f"Upstream returned HTTP {response.status_code} for channel {channel_id}"
            )

        logger.debug("Fetched %d bytes for channel %s", len(response.content), channel_id)
        return response.content
