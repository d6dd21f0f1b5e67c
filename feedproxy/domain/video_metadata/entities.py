"""
Video Metadata Entities

Classified video records and the rules used to build and display them.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

SHORT_MAX_DURATION_SECONDS = 180


def classify_short(duration: int, width: int, height: int) -> bool:
    """
    Decide whether a video is a Short.

    Shorts are at most three minutes long and portrait or square.
    """
    return duration <= SHORT_MAX_DURATION_SECONDS and height >= width


def format_duration(seconds: int) -> str:
    """Return ``"42s"`` below one minute, ``"m:ss"`` followed by ``s`` otherwise."""
    minutes, seconds = divmod(seconds, 60)
    if minutes == 0:
        return f"{seconds}s"
    return f"{minutes}:{seconds:02d}s"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass(frozen=True)
class VideoRecord:
    """
    Entity representing the classification of one video.

    Records are created once when the video is first seen and never
    updated afterwards. ``fetched_at`` is kept at whole-second precision
    so a record survives a trip through the snapshot file unchanged.
    """
    video_id: str
    length_seconds: int
    is_short: bool
    fetched_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self):
        """Validate required fields."""
        if not self.video_id:
            raise ValueError("Video ID is required")
        if self.length_seconds < 0:
            raise ValueError("Length must be non-negative")
        fetched_at = self.fetched_at
        if fetched_at.tzinfo is None:
            fetched_at = fetched_at.replace(tzinfo=timezone.utc)
        object.__setattr__(self, "fetched_at", fetched_at.replace(microsecond=0))

    @classmethod
    def from_metadata(
        cls,
        video_id: str,
        duration: int,
        width: int,
        height: int,
        fetched_at: Optional[datetime] = None,
    ) -> "VideoRecord":
        """Build a classified record from raw duration and dimensions."""
        return cls(
            video_id=video_id,
            length_seconds=duration,
            is_short=classify_short(duration, width, height),
            fetched_at=fetched_at or _utcnow(),
        )

    @property
    def formatted_length(self) -> str:
        return format_duration(self.length_seconds)

    def to_snapshot(self) -> Dict[str, Any]:
        """Serialize to the persisted ``{timestamp, length, is_short}`` form."""
        return {
            "timestamp": int(self.fetched_at.timestamp()),
            "length": self.length_seconds,
            "is_short": self.is_short,
        }

    @classmethod
    def from_snapshot(cls, video_id: str, data: Any) -> "VideoRecord":
        """
        Rebuild a record from its persisted form.

        Raises:
            ValueError: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"record for {video_id!r} is not an object")

        timestamp = data.get("timestamp")
        length = data.get("length")
        is_short = data.get("is_short")

        # bool is a subclass of int
        if not isinstance(timestamp, int) or isinstance(timestamp, bool):
            raise ValueError(f"record for {video_id!r} has invalid timestamp")
        if not isinstance(length, int) or isinstance(length, bool) or length < 0:
            raise ValueError(f"record for {video_id!r} has invalid length")
        if not isinstance(is_short, bool):
            raise ValueError(f"record for {video_id!r} has invalid is_short")

        try:
            fetched_at = datetime.fromtimestamp(timestamp, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"record for {video_id!r} has invalid timestamp") from e

        return cls(
            video_id=video_id,
            length_seconds=length,
            is_short=is_short,
            fetched_at=fetched_at,
        )
