"""
Feed Entities

Read-only views over a parsed YouTube Atom feed.
"""

import copy
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import List, Optional

from feedproxy.domain.errors import FeedParseError

ATOM_NS = "http://www.w3.org/2005/Atom"
YOUTUBE_NS = "http://www.youtube.com/xml/schemas/2015"
MEDIA_NS = "http://search.yahoo.com/mrss/"

# Keep the prefixes YouTube itself uses instead of ns0/ns1/ns2
ET.register_namespace("", ATOM_NS)
ET.register_namespace("yt", YOUTUBE_NS)
ET.register_namespace("media", MEDIA_NS)

ENTRY = "entry"
VIDEO_ID = "videoId"
TITLE = "title"


def local_name(tag) -> str:
    """Strip the ``{namespace}`` part of an element tag."""
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def find_child(element: ET.Element, name: str) -> Optional[ET.Element]:
    """Return the first direct child whose local name is ``name``."""
    for child in element:
        if local_name(child.tag) == name:
            return child
    return None


@dataclass(frozen=True)
class FeedEntry:
    """
    One ``<entry>`` of the feed.

    Wraps the parsed element; the element itself is never modified.
    """
    element: ET.Element

    @property
    def video_id(self) -> Optional[str]:
        """Text of ``<yt:videoId>``, or None if absent or empty."""
        child = find_child(self.element, VIDEO_ID)
        if child is None or not child.text:
            return None
        return child.text.strip() or None

    @property
    def title_element(self) -> Optional[ET.Element]:
        return find_child(self.element, TITLE)

    @property
    def title(self) -> Optional[str]:
        """Text of ``<title>``, or None if absent."""
        child = self.title_element
        if child is None or child.text is None:
            return None
        return child.text


class FeedDocument:
    """
    A parsed feed: entries plus channel-level content.

    Treat instances as immutable; transformations build a new document.
    """

    def __init__(self, root: ET.Element):
        self._root = root

    @classmethod
    def parse(cls, data: bytes) -> "FeedDocument":
        """
        Parse raw feed bytes.

        Raises:
            FeedParseError: If the data is not well-formed XML
        """
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise FeedParseError(f"Failed to parse feed: {e}", original_error=e) from e
        return cls(root)

    @property
    def root(self) -> ET.Element:
        return self._root

    def entries(self) -> List[FeedEntry]:
        """All entries in document order."""
        return [FeedEntry(child) for child in self._root if is_entry(child)]

    def to_bytes(self) -> bytes:
        """Serialize as indented UTF-8 XML with a declaration."""
        root = copy.deepcopy(self._root)
        ET.indent(root, space="  ")
        return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def is_entry(element: ET.Element) -> bool:
    return local_name(element.tag) == ENTRY
