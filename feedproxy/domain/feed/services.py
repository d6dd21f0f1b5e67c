"""
Feed Services

Domain service that filters Shorts out of a feed and annotates the
remaining titles with the video duration.
"""

import copy
import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass

from feedproxy.domain.errors import MalformedEntryError
from feedproxy.domain.video_metadata.entities import VideoRecord
from feedproxy.domain.video_metadata.services import VideoMetadataStore

from .entities import FeedDocument, FeedEntry, is_entry, local_name

logger = logging.getLogger(__name__)

# Removed so readers show the publication date, not the last edit
UPDATED = "updated"
MEDIA_GROUP = "group"


@dataclass(frozen=True)
class TransformResult:
    """Outcome of a transform: the new document and what happened to the entries."""
    document: FeedDocument
    entries_seen: int
    entries_kept: int
    shorts_dropped: int


class FeedTransformer:
    """
    Builds a filtered copy of a feed.

    The source document is left untouched. The output holds the root's
    non-entry children in their original order, followed by every kept
    entry appended as one block, also in original order. Entries do not
    return to their original positions among the channel metadata.

    The first entry without a video id or title aborts the whole
    transform; so does any metadata fetch failure.
    """

    def __init__(self, strip_media_group: bool = True):
        """
        Args:
            strip_media_group: Also drop ``<media:group>`` from kept entries
        """
        self.strip_media_group = strip_media_group
        self._stripped = {UPDATED, MEDIA_GROUP} if strip_media_group else {UPDATED}

    def transform(self, document: FeedDocument, store: VideoMetadataStore) -> TransformResult:
        """
        Filter and rewrite every entry of ``document``.

        Args:
            document: Parsed upstream feed
            store: Metadata cache consulted for each entry

        Returns:
            TransformResult with the new document

        Raises:
            MalformedEntryError: If an entry lacks its video id or title
            MetadataToolError: If metadata for an entry cannot be fetched
        """
        entries = document.entries()
        kept = []
        dropped = 0

        for position, entry in enumerate(entries):
            video_id = entry.video_id
            if video_id is None:
                raise MalformedEntryError(f"Entry {position}: videoId element missing")
            title = entry.title
            if title is None:
                raise MalformedEntryError(f"Entry {position} ({video_id}): title element missing")

            record = store.get_or_fetch(video_id)
            if record.is_short:
                logger.debug("Dropping short %s", video_id)
                dropped += 1
                continue

            kept.append(self._rewrite_entry(entry, title, record))

        source = document.root
        root = ET.Element(source.tag, dict(source.attrib))
        root.text = source.text
        root.tail = source.tail
        for child in source:
            if not is_entry(child):
                root.append(copy.deepcopy(child))
        root.extend(kept)

        return TransformResult(
            document=FeedDocument(root),
            entries_seen=len(entries),
            entries_kept=len(kept),
            shorts_dropped=dropped,
        )

    def _rewrite_entry(self, entry: FeedEntry, title: str, record: VideoRecord) -> ET.Element:
        source = entry.element
        title_element = entry.title_element

        rewritten = ET.Element(source.tag, dict(source.attrib))
        rewritten.text = source.text
        rewritten.tail = source.tail

        for child in source:
            if local_name(child.tag) in self._stripped:
                continue
            if child is title_element:
                new_title = ET.Element(child.tag, dict(child.attrib))
                new_title.text = f"{title} ({record.formatted_length})"
                new_title.tail = child.tail
                rewritten.append(new_title)
            else:
                rewritten.append(copy.deepcopy(child))

        return rewritten
