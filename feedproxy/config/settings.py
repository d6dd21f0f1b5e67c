"""
Proxy Configuration

Settings read from environment variables with defaults suitable for
running the proxy next to a desktop feed reader.
"""

import os
import shlex
from typing import Optional

METADATA_BACKENDS = ("cli", "library")


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class ProxyConfig:
    """Feed proxy configuration settings."""

    def __init__(self):
        self.host = os.getenv("FEEDPROXY_HOST", "127.0.0.1")
        self.port = int(os.getenv("FEEDPROXY_PORT", 12380))
        self.state_file = os.getenv("FEEDPROXY_STATE_FILE", "state.json")
        self.feed_path = os.getenv("FEEDPROXY_FEED_PATH", "/www.youtube.com/feeds/videos.xml")
        self.upstream_url = os.getenv("FEEDPROXY_UPSTREAM_URL", "https://www.youtube.com/feeds/videos.xml")

        timeout = os.getenv("FEEDPROXY_UPSTREAM_TIMEOUT", "30")
        self.upstream_timeout: Optional[float] = float(timeout) if timeout.strip() else None

        self.metadata_backend = os.getenv("FEEDPROXY_METADATA_BACKEND", "cli").strip().lower()
        if self.metadata_backend not in METADATA_BACKENDS:
            raise ValueError(
                f"FEEDPROXY_METADATA_BACKEND must be one of {', '.join(METADATA_BACKENDS)}, "
                f"got {self.metadata_backend!r}"
            )

        self.ytdlp_path = os.getenv("FEEDPROXY_YTDLP_PATH", "yt-dlp")
        # e.g. "--cookies /path/cookies.txt"; split like a shell command line
        self.ytdlp_args = shlex.split(os.getenv("FEEDPROXY_YTDLP_ARGS", ""))
        self.strip_media_group = _env_bool("FEEDPROXY_STRIP_MEDIA_GROUP", True)
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

        if not self.feed_path.startswith("/"):
            self.feed_path = "/" + self.feed_path
