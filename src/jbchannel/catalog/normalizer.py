"""Normalization of raw feed entries into media items."""

import logging
from datetime import datetime, timezone

from dateutil import parser as date_parser

from jbchannel.catalog.models import MediaItem, Show
from jbchannel.feeds.duration import parse_duration_ticks
from jbchannel.feeds.models import FeedDocument, RawFeedEntry

logger = logging.getLogger(__name__)

_HOUR = 3600

# RFC 822 zone names dateutil does not know, as UTC offsets in seconds
RFC822_TZINFOS = {
    "EST": -5 * _HOUR,
    "EDT": -4 * _HOUR,
    "CST": -6 * _HOUR,
    "CDT": -5 * _HOUR,
    "MST": -7 * _HOUR,
    "MDT": -6 * _HOUR,
    "PST": -8 * _HOUR,
    "PDT": -7 * _HOUR,
}


def parse_pub_date(pub_date: str | None) -> datetime | None:
    """Parse a feed publish date.

    Naive values are taken as UTC so every result is comparable.

    Args:
        pub_date: Raw ``pubDate`` text (RFC 822 in practice)

    Returns:
        Timezone-aware datetime, or None when missing or unparseable
    """
    if not pub_date:
        return None

    try:
        parsed = date_parser.parse(pub_date, tzinfos=RFC822_TZINFOS)
    except (ValueError, OverflowError) as e:
        logger.debug("Failed to parse publish date %r: %s", pub_date, e)
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def normalize_entry(entry: RawFeedEntry, show: Show) -> MediaItem:
    """Build a MediaItem from one feed entry.

    The enclosure URL becomes both id and source, with no validation, so
    an entry without an enclosure still yields an item. The runtime is
    only set when the entry carries a duration. Both date fields share
    one parsed publish date.

    Args:
        entry: Raw feed entry
        show: Show that owns the feed

    Returns:
        MediaItem
    """
    runtime_ticks = None
    if entry.duration is not None:
        runtime_ticks = parse_duration_ticks(entry.duration)

    published = parse_pub_date(entry.pub_date)

    return MediaItem(
        id=entry.enclosure_url,
        name=entry.title,
        show_id=show.id,
        source_url=entry.enclosure_url,
        overview=entry.summary,
        image_url=show.artwork_url,
        runtime_ticks=runtime_ticks,
        date_created=published,
        premiere_date=published,
    )


def normalize_document(document: FeedDocument, show: Show) -> list[MediaItem]:
    """Normalize every entry of a feed, preserving document order."""
    return [normalize_entry(entry, show) for entry in document.entries]
