"""
Video Metadata Services

The shared, thread-safe cache of classified videos.
"""

import logging
import threading
from typing import Any, Dict, Optional

from feedproxy.domain.errors import PersistenceError

from .entities import VideoRecord
from .repositories import IMetadataFetcher, ISnapshotStorage

logger = logging.getLogger(__name__)

SNAPSHOT_KEY = "youtube_videos"


class VideoMetadataStore:
    """
    Cache of VideoRecords shared by every request worker.

    Lookups and insertions each take the lock on their own; the fetch on a
    cache miss runs without it so one slow yt-dlp call does not stall every
    other request. Two workers missing on the same id at the same time will
    therefore both fetch it, and the later insertion wins. Records are
    immutable once classified, so either copy is valid.

    ``persist`` holds the lock for the whole write, so snapshots are never
    written concurrently.
    """

    def __init__(
        self,
        fetcher: IMetadataFetcher,
        storage: ISnapshotStorage,
        records: Optional[Dict[str, VideoRecord]] = None,
    ):
        """
        Initialize the store.

        Args:
            fetcher: Used to classify videos on a cache miss
            storage: Durable location of the snapshot
            records: Initial contents, treated as already persisted
        """
        self._fetcher = fetcher
        self._storage = storage
        self._records: Dict[str, VideoRecord] = dict(records or {})
        self._dirty = False
        self._lock = threading.Lock()

    @classmethod
    def load(cls, storage: ISnapshotStorage, fetcher: IMetadataFetcher) -> "VideoMetadataStore":
        """
        Create a store from the snapshot in ``storage``.

        An absent snapshot yields an empty store.

        Raises:
            PersistenceError: If the snapshot is malformed
        """
        snapshot = storage.read()
        records = cls._records_from_snapshot(snapshot, storage.location) if snapshot is not None else {}
        logger.info("Loaded %d video records from %s", len(records), storage.location)
        return cls(fetcher, storage, records)

    @staticmethod
    def _records_from_snapshot(snapshot: Any, location: str) -> Dict[str, VideoRecord]:
        if not isinstance(snapshot, dict):
            raise PersistenceError(f"Malformed snapshot in {location}: expected an object")

        videos = snapshot[SNAPSHOT_KEY] if SNAPSHOT_KEY in snapshot else snapshot
        if not isinstance(videos, dict):
            raise PersistenceError(f"Malformed snapshot in {location}: '{SNAPSHOT_KEY}' is not an object")

        records: Dict[str, VideoRecord] = {}
        for video_id, data in videos.items():
            try:
                records[video_id] = VideoRecord.from_snapshot(video_id, data)
            except ValueError as e:
                raise PersistenceError(f"Malformed snapshot in {location}: {e}", original_error=e) from e
        return records

    @property
    def dirty(self) -> bool:
        with self._lock:
            return self._dirty

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, video_id: str) -> bool:
        with self._lock:
            return video_id in self._records

    def get(self, video_id: str) -> Optional[VideoRecord]:
        """Return the cached record for ``video_id`` without fetching."""
        with self._lock:
            return self._records.get(video_id)

    def records(self) -> Dict[str, VideoRecord]:
        """Return a copy of all cached records."""
        with self._lock:
            return dict(self._records)

    def get_or_fetch(self, video_id: str) -> VideoRecord:
        """
        Return the record for ``video_id``, fetching it on a cache miss.

        Args:
            video_id: YouTube video id

        Returns:
            Cached or freshly fetched VideoRecord

        Raises:
            MetadataToolError: If the fetch fails; the store is left unchanged
        """
        with self._lock:
            record = self._records.get(video_id)
        if record is not None:
            return record

        logger.debug("Cache miss for video %s, fetching metadata", video_id)
        record = self._fetcher.fetch(video_id)

        with self._lock:
            self._records[video_id] = record
            self._dirty = True

        logger.info(
            "Classified video %s: %s, short=%s",
            video_id,
            record.formatted_length,
            record.is_short,
        )
        return record

    def persist(self) -> bool:
        """
        Write the snapshot if the store has unsaved changes.

        Returns:
            True if a snapshot was written, False if there was nothing to do

        Raises:
            PersistenceError: If the write fails; the store stays dirty
        """
        with self._lock:
            if not self._dirty:
                return False

            snapshot = {
                SNAPSHOT_KEY: {
                    video_id: record.to_snapshot()
                    for video_id, record in self._records.items()
                }
            }
            self._storage.write(snapshot)
            self._dirty = False
            count = len(self._records)

        logger.info("Persisted %d video records to %s", count, self._storage.location)
        return True
