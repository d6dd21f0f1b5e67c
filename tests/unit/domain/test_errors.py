"""
Unit tests for domain errors.

Tests verify:
- Every concrete error carries its category tag
- The original error is kept for the cause chain
- Only configuration errors map to a client error status
"""

import pytest

from feedproxy.domain.errors import (
    ConfigError,
    DomainError,
    ErrorCategory,
    FeedParseError,
    MalformedEntryError,
    MetadataToolError,
    PersistenceError,
    ToolFailure,
    UpstreamFetchError,
    http_status_for,
)


class TestDomainErrors:

    @pytest.mark.parametrize(
        "error,category",
        [
            (ConfigError("x"), ErrorCategory.CONFIG),
            (UpstreamFetchError("x"), ErrorCategory.UPSTREAM_FETCH),
            (FeedParseError("x"), ErrorCategory.FEED_PARSE),
            (MalformedEntryError("x"), ErrorCategory.MALFORMED_ENTRY),
            (MetadataToolError(ToolFailure.FAILED, "x"), ErrorCategory.METADATA_TOOL),
            (PersistenceError("x"), ErrorCategory.PERSISTENCE),
        ],
    )
    def test_category(self, error, category):
        assert isinstance(error, DomainError)
        assert error.category is category

    def test_message(self):
        error = MalformedEntryError("videoId element missing")

        assert str(error) == "videoId element missing"
        assert error.original_error is None

    def test_metadata_tool_error_failure_tag(self):
        error = MetadataToolError(ToolFailure.UNAVAILABLE, "yt-dlp not found")

        assert error.failure is ToolFailure.UNAVAILABLE
        assert str(error) == "yt-dlp not found"

    def test_cause_chain(self):
        root = OSError("No space left on device")
        inner = PersistenceError("write failed", original_error=root)
        outer = UpstreamFetchError("request failed", original_error=inner)

        assert outer.cause_chain() == [
            "request failed",
            "write failed",
            "No space left on device",
        ]

    def test_cause_chain_follows_raise_from(self):
        try:
            try:
                raise KeyError("duration")
            except KeyError as e:
                raise ValueError("bad output") from e
        except ValueError as e:
            error = MetadataToolError(ToolFailure.UNPARSABLE, "unparsable", original_error=e)

        assert error.cause_chain() == ["unparsable", "bad output", "'duration'"]


class TestHttpStatus:

    def test_config_error_is_client_error(self):
        assert http_status_for(ConfigError("channel_id param missing")) == 400

    @pytest.mark.parametrize(
        "error",
        [
            UpstreamFetchError("x"),
            FeedParseError("x"),
            MalformedEntryError("x"),
            MetadataToolError(ToolFailure.FAILED, "x"),
            PersistenceError("x"),
        ],
    )
    def test_everything_else_is_server_error(self, error):
        assert http_status_for(error) == 500
