"""
Feed Domain

Parsing, filtering and rewriting of channel feeds.
"""

from .entities import ATOM_NS, MEDIA_NS, YOUTUBE_NS, FeedDocument, FeedEntry
from .repositories import IFeedClient
from .services import FeedTransformer, TransformResult

__all__ = [
    "ATOM_NS",
    "MEDIA_NS",
    "YOUTUBE_NS",
    "FeedDocument",
    "FeedEntry",
    "IFeedClient",
    "FeedTransformer",
    "TransformResult",
]
