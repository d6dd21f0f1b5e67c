"""
Logging Event Handler

Subscribes to feed proxy events and writes them to the log.
"""

import logging
from typing import Any, Dict

from feedproxy.domain.events import DomainEvent, FeedRequestFailedEvent, FeedServedEvent


class LoggingEventHandler:
    """
    Infrastructure event handler for logging domain events.

    Each record carries the serialized event as ``record.event`` for
    handlers that emit structured output.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def handle(self, event: DomainEvent) -> None:
        if isinstance(event, FeedServedEvent):
            self._handle_feed_served(event)
        elif isinstance(event, FeedRequestFailedEvent):
            self._handle_request_failed(event)
        else:
            self.logger.debug(
                f"Unhandled event: {event.__class__.__name__} "
                f"(aggregate_id={event.aggregate_id})",
                extra=self._extra(event),
            )

    def _handle_feed_served(self, event: FeedServedEvent) -> None:
        self.logger.info(
            f"Feed served: channel_id={event.aggregate_id}, "
            f"kept={event.entries_kept}/{event.entries_seen}, "
            f"shorts_dropped={event.shorts_dropped}, persisted={event.persisted}",
            extra=self._extra(event),
        )

    def _handle_request_failed(self, event: FeedRequestFailedEvent) -> None:
        self.logger.warning(
            f"Feed request failed: channel_id={event.aggregate_id or '-'}, "
            f"category={event.category}, error={event.error_message}",
            extra=self._extra(event),
        )

    @staticmethod
    def _extra(event: DomainEvent) -> Dict[str, Any]:
        return {"event": event.to_dict()}
