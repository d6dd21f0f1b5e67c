"""
Event Publisher

Application service for publishing domain events to registered handlers.
"""

import logging
from threading import Lock
from typing import Callable, Dict, List, Type

from feedproxy.domain.events import DomainEvent

logger = logging.getLogger(__name__)


class EventPublisher:
    """
    Dispatches domain events synchronously to handlers registered per type.

    A failing handler is logged and skipped; it never fails the request
    that published the event. Safe to use from concurrent request threads.
    """

    def __init__(self):
        self._handlers: Dict[Type[DomainEvent], List[Callable[[DomainEvent], None]]] = {}
        self._lock = Lock()

    def subscribe(
        self,
        event_type: Type[DomainEvent],
        handler: Callable[[DomainEvent], None]
    ) -> None:
        """
        Register a handler for a specific event type.

        Example:
            publisher.subscribe(FeedServedEvent, logging_handler.handle)
        """
        with self._lock:
            self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(
            "Registered handler %s for %s",
            getattr(handler, "__name__", repr(handler)),
            event_type.__name__,
        )

    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all handlers registered for its type."""
        event_type = type(event)

        with self._lock:
            handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug("No handlers registered for %s", event_type.__name__)
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    "Error in handler %s for %s: %s",
                    getattr(handler, "__name__", repr(handler)),
                    event_type.__name__,
                    e,
                    exc_info=True,
                )
