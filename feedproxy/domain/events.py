"""
Domain Events

Immutable records of what happened while serving a feed.
Events decouple logging from the request pipeline.
"""

from abc import ABC
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Base class for all domain events.

    Attributes:
        aggregate_id: Channel id the event relates to
        occurred_at: Timestamp when the event occurred
    """
    aggregate_id: str
    occurred_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization."""
        return {
            "event_type": self.__class__.__name__,
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
        }


@dataclass(frozen=True)
class FeedServedEvent(DomainEvent):
    """
    Event emitted when a transformed feed has been produced.

    Attributes:
        entries_seen: Entries in the upstream feed
        entries_kept: Entries in the response
        shorts_dropped: Entries removed as Shorts
        persisted: Whether the metadata snapshot was rewritten
    """
    entries_seen: int
    entries_kept: int
    shorts_dropped: int
    persisted: bool

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            "entries_seen": self.entries_seen,
            "entries_kept": self.entries_kept,
            "shorts_dropped": self.shorts_dropped,
            "persisted": self.persisted,
        })
        return base_dict


@dataclass(frozen=True)
class FeedRequestFailedEvent(DomainEvent):
    """
    Event emitted when serving a feed fails.

    Attributes:
        category: ErrorCategory value of the failure
        error_message: Message of the error
    """
    category: str
    error_message: str

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            "category": self.category,
            "error_message": self.error_message,
        })
        return base_dict
