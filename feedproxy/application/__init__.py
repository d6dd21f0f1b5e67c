"""
Application Layer

Use cases that coordinate the domain services.
"""

from .event_publisher import EventPublisher
from .feed_proxy_service import FeedProxyService

__all__ = ["EventPublisher", "FeedProxyService"]
