"""
Application Factory

Creates and configures the Flask application with all dependencies.
Tests pass a ready-made FeedProxyService to avoid yt-dlp and network
access.
"""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from feedproxy.api import create_feed_blueprint, register_error_handlers
from feedproxy.application import EventPublisher, FeedProxyService
from feedproxy.config import ProxyConfig
from feedproxy.domain.events import FeedRequestFailedEvent, FeedServedEvent
from feedproxy.domain.feed import FeedTransformer
from feedproxy.domain.video_metadata import VideoMetadataStore
from feedproxy.infrastructure import JsonSnapshotFile, YouTubeFeedClient
from feedproxy.infrastructure.event_handlers import LoggingEventHandler
from feedproxy.infrastructure.metadata_fetcher_factory import MetadataFetcherFactory

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[ProxyConfig] = None,
    feed_service: Optional[FeedProxyService] = None,
) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Proxy configuration, uses default if None
        feed_service: Pre-built service; built from ``config`` if None

    Returns:
        Configured Flask application

    Raises:
        PersistenceError: If the existing snapshot file is malformed
    """
    if config is None:
        config = ProxyConfig()

    app = Flask(__name__)

    # Browser-based readers fetch the feed cross-origin
    CORS(app, resources={config.feed_path: {"origins": "*", "methods": ["GET"]}})

    if feed_service is None:
        feed_service = _build_feed_service(config)
    app.feed_proxy_service = feed_service

    app.register_blueprint(create_feed_blueprint(config.feed_path))
    register_error_handlers(app)

    logger.info("Serving filtered feeds at %s", config.feed_path)
    return app


def _build_feed_service(config: ProxyConfig) -> FeedProxyService:
    """
    Wire the production collaborators.

    The store is created once here and shared by every request thread.
    """
    storage = JsonSnapshotFile(config.state_file)
    fetcher = MetadataFetcherFactory.create_fetcher(config)
    store = VideoMetadataStore.load(storage, fetcher)

    publisher = EventPublisher()
    logging_handler = LoggingEventHandler(logging.getLogger("feedproxy.events"))
    publisher.subscribe(FeedServedEvent, logging_handler.handle)
    publisher.subscribe(FeedRequestFailedEvent, logging_handler.handle)

    return FeedProxyService(
        feed_client=YouTubeFeedClient(config.upstream_url, timeout=config.upstream_timeout),
        store=store,
        transformer=FeedTransformer(strip_media_group=config.strip_media_group),
        event_publisher=publisher,
    )
