"""
Helpers shared by the yt-dlp backed metadata fetchers.
"""

from typing import Any, Dict, Tuple

from feedproxy.domain.errors import MetadataToolError, ToolFailure

REQUIRED_FIELDS = ("duration", "width", "height")


def read_dimensions(info: Any, video_id: str) -> Tuple[int, int, int]:
    """
    Pull ``(duration, width, height)`` out of a yt-dlp info dict.

    Raises:
        MetadataToolError: UNPARSABLE if a field is missing or not a
            non-negative integer
    """
    if not isinstance(info, dict):
        raise MetadataToolError(
            ToolFailure.UNPARSABLE,
            f"yt-dlp output for {video_id} is not a JSON object",
        )

    values: Dict[str, int] = {}
    for name in REQUIRED_FIELDS:
        value = info.get(name)
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise MetadataToolError(
                ToolFailure.UNPARSABLE,
                f"yt-dlp output for {video_id} has no integer '{name}' (got {value!r})",
            )
        values[name] = value

    return values["duration"], values["width"], values["height"]
