"""
Feed Repository Interfaces
"""

from abc import ABC, abstractmethod


class IFeedClient(ABC):
    """
    Interface for fetching the raw upstream feed of a channel.
    """

    @abstractmethod
    def fetch_feed(self, channel_id: str) -> bytes:
        """
        Fetch the raw feed document.

        Args:
            channel_id: YouTube channel id

        Returns:
            Raw XML bytes as served upstream

        Raises:
            UpstreamFetchError: On network failure or a non-success status
        """
        pass
