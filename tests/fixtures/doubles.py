"""
Test doubles for the metadata store's collaborators.
"""

import copy
import threading
from collections import Counter
from typing import Any, Dict, Optional, Tuple, Union

from feedproxy.domain.errors import MetadataToolError, PersistenceError, ToolFailure
from feedproxy.domain.video_metadata import IMetadataFetcher, ISnapshotStorage, VideoRecord

Canned = Union[Tuple[int, int, int], Exception]


class StubMetadataFetcher(IMetadataFetcher):
    """
    Returns canned classifications and counts calls per video id.

    Values are ``(duration, width, height)`` tuples or an exception to
    raise. Unknown ids raise ``MetadataToolError(FAILED)``.
    """

    def __init__(self, canned: Optional[Dict[str, Canned]] = None):
        self.canned: Dict[str, Canned] = dict(canned or {})
        self.calls: Counter = Counter()
        self._lock = threading.Lock()

    @property
    def total_calls(self) -> int:
        with self._lock:
            return sum(self.calls.values())

    def fetch(self, video_id: str) -> VideoRecord:
        with self._lock:
            self.calls[video_id] += 1
        value = self.canned.get(video_id)
        if value is None:
            raise MetadataToolError(ToolFailure.FAILED, f"no canned metadata for {video_id}")
        if isinstance(value, Exception):
            raise value
        duration, width, height = value
        return VideoRecord.from_metadata(video_id, duration, width, height)


class InMemorySnapshotStorage(ISnapshotStorage):
    """Keeps the snapshot in memory; can be told to fail writes."""

    def __init__(self, snapshot: Optional[Dict[str, Any]] = None):
        self.snapshot = copy.deepcopy(snapshot)
        self.writes = 0
        self.fail_writes = False

    @property
    def location(self) -> str:
        return "memory://snapshot"

    def read(self) -> Optional[Dict[str, Any]]:
        return copy.deepcopy(self.snapshot)

    def write(self, snapshot: Dict[str, Any]) -> None:
        if self.fail_writes:
            raise PersistenceError("disk full")
        self.writes += 1
        self.snapshot = copy.deepcopy(snapshot)
