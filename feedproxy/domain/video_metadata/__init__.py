"""
Video Metadata Domain

Classification of videos as Shorts and the shared cache of results.
"""

from .entities import SHORT_MAX_DURATION_SECONDS, VideoRecord, classify_short, format_duration
from .repositories import IMetadataFetcher, ISnapshotStorage
from .services import VideoMetadataStore
from .value_objects import InvalidVideoIdError, VideoId

__all__ = [
    "SHORT_MAX_DURATION_SECONDS",
    "VideoRecord",
    "VideoId",
    "InvalidVideoIdError",
    "IMetadataFetcher",
    "ISnapshotStorage",
    "VideoMetadataStore",
    "classify_short",
    "format_duration",
]
