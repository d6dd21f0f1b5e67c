"""
Video Metadata Repository Interfaces

Ports the metadata store depends on. Infrastructure provides the
yt-dlp and JSON file implementations; tests provide doubles.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from .entities import VideoRecord


class IMetadataFetcher(ABC):
    """
    Interface for obtaining and classifying metadata of a single video.
    """

    @abstractmethod
    def fetch(self, video_id: str) -> VideoRecord:
        """
        Fetch duration and dimensions for a video and classify it.

        Args:
            video_id: Opaque YouTube video id

        Returns:
            A freshly classified VideoRecord

        Raises:
            MetadataToolError: If the tool is unavailable, fails, or its
                output cannot be parsed
        """
        pass


class ISnapshotStorage(ABC):
    """
    Interface for durable storage of the metadata snapshot.
    """

    @abstractmethod
    def read(self) -> Optional[Dict[str, Any]]:
        """
        Read the stored snapshot.

        Returns:
            The decoded snapshot, or None if nothing has been stored yet

        Raises:
            PersistenceError: If the stored data cannot be read or decoded
        """
        pass

    @abstractmethod
    def write(self, snapshot: Dict[str, Any]) -> None:
        """
        Replace the stored snapshot.

        Raises:
            PersistenceError: If the snapshot cannot be written
        """
        pass

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location of the snapshot, used in logs and errors."""
        pass
