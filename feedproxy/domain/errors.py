"""
Error Handling Module

Defines domain exceptions and error categories for the feed proxy.
Every error carries a category tag and, optionally, the original error
that caused it, so the request boundary can render a single message and
pick a status code without inspecting exception types.
"""

from enum import Enum
from typing import List, Optional


class ErrorCategory(Enum):
    """Error category enumeration for structured error handling."""

    CONFIG = "config"
    UPSTREAM_FETCH = "upstream_fetch"
    FEED_PARSE = "feed_parse"
    MALFORMED_ENTRY = "malformed_entry"
    METADATA_TOOL = "metadata_tool"
    PERSISTENCE = "persistence"


class ToolFailure(Enum):
    """Subcases of a metadata tool failure."""

    UNAVAILABLE = "unavailable"
    FAILED = "failed"
    UNPARSABLE = "unparsable"


# ============================================================================
# Domain Exceptions
# ============================================================================

class DomainError(Exception):
    """
    Base exception for all feed proxy errors.

    Subclasses pin ``category``; callers branch on the category rather
    than on the concrete class.
    """

    category: ErrorCategory = ErrorCategory.CONFIG

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        """
        Initialize domain error.

        Args:
            message: Error message
            original_error: Optional original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def cause_chain(self) -> List[str]:
        """Return this error's message followed by the messages of its causes."""
        chain = [self.message]
        cause = self.original_error
        while cause is not None:
            chain.append(str(cause) or cause.__class__.__name__)
            cause = getattr(cause, "original_error", None) or cause.__cause__
        return chain


class ConfigError(DomainError):
    """Raised when a required request parameter is missing."""

    category = ErrorCategory.CONFIG


class UpstreamFetchError(DomainError):
    """Raised when the upstream feed cannot be fetched or answers non-2xx."""

    category = ErrorCategory.UPSTREAM_FETCH


class FeedParseError(DomainError):
    """Raised when the upstream document is not well-formed XML."""

    category = ErrorCategory.FEED_PARSE


class MalformedEntryError(DomainError):
    """Raised when a feed entry lacks its video id or title."""

    category = ErrorCategory.MALFORMED_ENTRY


class MetadataToolError(DomainError):
    """
    Raised when video metadata cannot be obtained.

    ``failure`` tells apart a tool that cannot be started, one that
    reports failure, and one whose output cannot be parsed.
    """

    category = ErrorCategory.METADATA_TOOL

    def __init__(
        self,
        failure: ToolFailure,
        message: str,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(message, original_error)
        self.failure = failure


class PersistenceError(DomainError):
    """Raised when the metadata snapshot cannot be read or written."""

    category = ErrorCategory.PERSISTENCE


def http_status_for(error: DomainError) -> int:
    """
    Map an error to the HTTP status the proxy answers with.

    A missing request parameter is the client's fault; everything else is
    reported as an internal error.
    """
    if error.category is ErrorCategory.CONFIG:
        return 400
    return 500
