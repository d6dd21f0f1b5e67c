"""
Video Metadata Value Objects

Immutable value objects for type safety and validation.
"""

from dataclasses import dataclass

WATCH_URL_TEMPLATE = "https://www.youtube.com/watch?v={video_id}"


class InvalidVideoIdError(ValueError):
    """Raised when a video id is empty."""
    pass


@dataclass(frozen=True)
class VideoId:
    """
    Value object representing a YouTube video id.

    The id is opaque; only emptiness is rejected.
    """
    value: str

    def __post_init__(self):
        if not self.value or not isinstance(self.value, str) or not self.value.strip():
            raise InvalidVideoIdError(f"Invalid video id: {self.value!r}")

    @property
    def watch_url(self) -> str:
        """Canonical watch URL handed to yt-dlp."""
        return WATCH_URL_TEMPLATE.format(video_id=self.value)

    def __str__(self) -> str:
        return self.value
