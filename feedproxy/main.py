"""
main.py

Runs the feed proxy on a local port.

Point the feed reader at
``http://127.0.0.1:12380/www.youtube.com/feeds/videos.xml?channel_id=<id>``
instead of the YouTube URL.
"""

import argparse
import logging
import sys
from typing import List, Optional

from feedproxy.app_factory import create_app
from feedproxy.config import ProxyConfig, configure_logging
from feedproxy.domain.errors import DomainError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="YouTube feed proxy that removes Shorts")
    parser.add_argument("--host", help="Address to listen on (FEEDPROXY_HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (FEEDPROXY_PORT)")
    parser.add_argument("--state-file", help="Metadata cache file (FEEDPROXY_STATE_FILE)")
    parser.add_argument("--log-level", help="Logging level (LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = ProxyConfig()
    except ValueError as e:
        configure_logging()
        logger.critical("Invalid configuration: %s", e)
        return 1

    if args.host:
        config.host = args.host
    if args.port is not None:
        config.port = args.port
    if args.state_file:
        config.state_file = args.state_file
    if args.log_level:
        config.log_level = args.log_level

    configure_logging(config.log_level)

    try:
        app = create_app(config)
    except DomainError as e:
        logger.critical("Could not start: %s", e)
        return 1

    try:
        app.run(host=config.host, port=config.port, threaded=True)
    except OSError as e:
        logger.critical("Could not listen on %s:%d: %s", config.host, config.port, e)
        return 1
    except SystemExit as e:
        # werkzeug reports a failed bind itself and exits instead of raising
        if e.code in (0, None):
            raise
        logger.critical("Could not listen on %s:%d (server exited with status %s)", config.host, config.port, e.code)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
