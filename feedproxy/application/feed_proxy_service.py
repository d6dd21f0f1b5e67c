"""
Feed Proxy Application Service

Coordinates serving one proxied feed request.
"""

import logging
from datetime import datetime, timezone
from typing import Optional

from feedproxy.domain.errors import ConfigError, DomainError
from feedproxy.domain.events import FeedRequestFailedEvent, FeedServedEvent
from feedproxy.domain.feed import FeedDocument, FeedTransformer, IFeedClient
from feedproxy.domain.video_metadata import VideoMetadataStore

from .event_publisher import EventPublisher

logger = logging.getLogger(__name__)


class FeedProxyService:
    """
    Application service for the feed proxy use case.

    Fetches the upstream feed, filters it through the shared metadata
    store, saves the store when anything new was classified and returns
    the serialized result. Nothing is retried and no partial feed is ever
    returned: the first error propagates to the caller unchanged.
    """

    def __init__(
        self,
        feed_client: IFeedClient,
        store: VideoMetadataStore,
        transformer: Optional[FeedTransformer] = None,
        event_publisher: Optional[EventPublisher] = None,
    ):
        """
        Initialize FeedProxyService with its collaborators.

        Args:
            feed_client: Fetches raw upstream feeds
            store: Metadata cache shared by all requests
            transformer: Feed transformer, defaults to FeedTransformer()
            event_publisher: Receives FeedServed/FeedRequestFailed events
        """
        self.feed_client = feed_client
        self.store = store
        self.transformer = transformer or FeedTransformer()
        self.event_publisher = event_publisher

    def handle(self, channel_id: Optional[str]) -> bytes:
        """
        Produce the filtered feed for a channel.

        Args:
            channel_id: YouTube channel id from the request

        Returns:
            Serialized XML document

        Raises:
            ConfigError: If channel_id is missing or blank
            UpstreamFetchError: If the upstream feed cannot be fetched
            FeedParseError: If the upstream feed is not valid XML
            MalformedEntryError: If an entry lacks its video id or title
            MetadataToolError: If a video cannot be classified
            PersistenceError: If the metadata snapshot cannot be written
        """
        if channel_id is None or not channel_id.strip():
            error = ConfigError("channel_id param missing")
            self._publish_failure("", error)
            raise error

        try:
            logger.info("Fetching feed for channel %s", channel_id)
            raw = self.feed_client.fetch_feed(channel_id)
            document = FeedDocument.parse(raw)

            result = self.transformer.transform(document, self.store)

            # Only after a complete transform, so failed requests never
            # reach the snapshot file
            persisted = self.store.persist()

            body = result.document.to_bytes()
        except DomainError as e:
            self._publish_failure(channel_id, e)
            raise

        self._publish(FeedServedEvent(
            aggregate_id=channel_id,
            occurred_at=datetime.now(timezone.utc),
            entries_seen=result.entries_seen,
            entries_kept=result.entries_kept,
            shorts_dropped=result.shorts_dropped,
            persisted=persisted,
        ))
        return body

    def _publish_failure(self, channel_id: str, error: DomainError) -> None:
        self._publish(FeedRequestFailedEvent(
            aggregate_id=channel_id,
            occurred_at=datetime.now(timezone.utc),
            category=error.category.value,
            error_message=str(error),
        ))

    def _publish(self, event) -> None:
        if self.event_publisher is not None:
            self.event_publisher.publish(event)
