"""
Unit tests for FeedProxyService.

The feed client is a Mock; the store uses the stub fetcher and in-memory
storage from the shared fixtures.
"""

import xml.etree.ElementTree as ET
from unittest.mock import Mock

import pytest

from feedproxy.application import EventPublisher, FeedProxyService
from feedproxy.domain.errors import (
    ConfigError,
    FeedParseError,
    MalformedEntryError,
    MetadataToolError,
    PersistenceError,
    UpstreamFetchError,
)
from feedproxy.domain.events import FeedRequestFailedEvent, FeedServedEvent
from feedproxy.domain.feed import IFeedClient
from tests.fixtures.feeds import CHANNEL_ID, build_feed_xml, tag


@pytest.fixture
def feed_client(mixed_feed_xml):
    client = Mock(spec=IFeedClient)
    client.fetch_feed.return_value = mixed_feed_xml
    return client


@pytest.fixture
def events():
    received = []
    publisher = EventPublisher()
    publisher.subscribe(FeedServedEvent, received.append)
    publisher.subscribe(FeedRequestFailedEvent, received.append)
    return publisher, received


@pytest.fixture
def service(feed_client, store, events):
    publisher, _ = events
    return FeedProxyService(feed_client, store, event_publisher=publisher)


class TestHandle:

    def test_returns_filtered_feed(self, service, feed_client):
        body = service.handle(CHANNEL_ID)

        assert body.startswith(b"<?xml version='1.0' encoding='utf-8'?>")
        root = ET.fromstring(body)
        titles = [e.find(tag("title")).text for e in root.iter(tag("entry"))]
        assert titles == ["B (3:20s)"]
        feed_client.fetch_feed.assert_called_once_with(CHANNEL_ID)

    @pytest.mark.parametrize("channel_id", [None, "", "   "])
    def test_missing_channel_id(self, service, feed_client, channel_id):
        with pytest.raises(ConfigError, match="channel_id param missing"):
            service.handle(channel_id)

        feed_client.fetch_feed.assert_not_called()

    def test_persists_new_records(self, service, store, storage):
        service.handle(CHANNEL_ID)

        assert storage.writes == 1
        assert set(storage.snapshot["youtube_videos"]) == {"short1", "long1", "short2"}
        assert not store.dirty

    def test_no_write_when_everything_cached(self, service, storage, fetcher):
        service.handle(CHANNEL_ID)
        service.handle(CHANNEL_ID)

        assert storage.writes == 1
        assert fetcher.total_calls == 3

    def test_served_event(self, service, events):
        _, received = events

        service.handle(CHANNEL_ID)

        assert len(received) == 1
        event = received[0]
        assert isinstance(event, FeedServedEvent)
        assert event.aggregate_id == CHANNEL_ID
        assert (event.entries_seen, event.entries_kept, event.shorts_dropped) == (3, 1, 2)
        assert event.persisted is True

    def test_works_without_publisher(self, feed_client, store):
        assert FeedProxyService(feed_client, store).handle(CHANNEL_ID)


class TestFailures:

    def test_upstream_error_propagates(self, service, feed_client, events):
        error = UpstreamFetchError("Upstream returned HTTP 404 for channel x")
        feed_client.fetch_feed.side_effect = error

        with pytest.raises(UpstreamFetchError) as exc_info:
            service.handle(CHANNEL_ID)

        assert exc_info.value is error
        _, received = events
        assert isinstance(received[0], FeedRequestFailedEvent)
        assert received[0].category == "upstream_fetch"

    def test_invalid_xml(self, service, feed_client):
        feed_client.fetch_feed.return_value = b"<feed><entry>"

        with pytest.raises(FeedParseError):
            service.handle(CHANNEL_ID)

    def test_malformed_entry_nothing_persisted(self, service, feed_client, storage, store):
        feed_client.fetch_feed.return_value = build_feed_xml([
            {"video_id": "long1", "title": "ok"},
            {"video_id": "wide1", "title": None},
        ])

        with pytest.raises(MalformedEntryError):
            service.handle(CHANNEL_ID)

        assert storage.writes == 0
        # Records classified before the failure stay cached for the next request
        assert "long1" in store
        assert store.dirty

    def test_metadata_failure_nothing_persisted(self, service, feed_client, storage):
        feed_client.fetch_feed.return_value = build_feed_xml([
            {"video_id": "long1", "title": "ok"},
            {"video_id": "unknown", "title": "missing"},
        ])

        with pytest.raises(MetadataToolError):
            service.handle(CHANNEL_ID)

        assert storage.writes == 0

    def test_persistence_failure_propagates(self, service, storage, store, events):
        storage.fail_writes = True

        with pytest.raises(PersistenceError, match="disk full"):
            service.handle(CHANNEL_ID)

        assert store.dirty
        _, received = events
        assert received[-1].category == "persistence"

    def test_failed_event_for_missing_channel_id(self, service, events):
        _, received = events

        with pytest.raises(ConfigError):
            service.handle(None)

        assert received[0].category == "config"
        assert received[0].aggregate_id == ""
