"""Cross-show aggregation of media items.

Every show's feed is fetched concurrently. A failing show contributes no
items and is logged; it never fails the aggregate call.
"""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime, timezone

from jbchannel.catalog.models import CatalogPage, ContentType, FolderItem, MediaItem, Show
from jbchannel.catalog.normalizer import normalize_document
from jbchannel.catalog.registry import ShowRegistry
from jbchannel.feeds.fetcher import FeedFetcher

logger = logging.getLogger(__name__)

# Undated items sort after every dated one.
_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class FetchOutcome:
    """Result of fetching one show's feed."""

    show_id: str
    feed_url: str | None
    items: list[MediaItem] = field(default_factory=list)
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.error is None


def latest_sort_key(item: MediaItem) -> datetime:
    """Sort key placing missing dates at the earliest possible instant."""
    return item.date_created or _EARLIEST


def sort_latest(items: Iterable[FolderItem | MediaItem]) -> list[MediaItem]:
    """Media items newest first, undated items last."""
    media = [item for item in items if isinstance(item, MediaItem)]
    return sorted(media, key=latest_sort_key, reverse=True)


class Aggregator:
    """Fans out feed fetches across every registered show.

    Example:
        >>> aggregator = Aggregator(ShowRegistry(), FeedFetcher())
        >>> latest = await aggregator.get_latest_media()
        >>> print(latest[0].name)
    """

    def __init__(
        self,
        registry: ShowRegistry,
        fetcher: FeedFetcher,
        max_concurrent_feeds: int | None = None,
    ) -> None:
        """Initialize the aggregator.

        Args:
            registry: Shows to aggregate
            fetcher: Feed fetcher shared by all tasks
            max_concurrent_feeds: Concurrency limit (defaults to one slot per show)
        """
        self.registry = registry
        self.fetcher = fetcher
        self.max_concurrent_feeds = max_concurrent_feeds or max(len(registry), 1)

    async def _fetch_show(self, show: Show) -> FetchOutcome:
        """Fetch and normalize one show, folding any failure into the outcome."""
        try:
            feed_url = self.registry.feed_url_for(show.id)
            document = await self.fetcher.fetch(feed_url, 0)
            items = normalize_document(document, show)
        except Exception as e:
            logger.warning("Failed to fetch the latest episodes for '%s': %s", show.id, e)
            return FetchOutcome(show_id=show.id, feed_url=show.feed_url, error=str(e))

        logger.debug("Fetched %d items for '%s'", len(items), show.id)
        return FetchOutcome(show_id=show.id, feed_url=show.feed_url, items=items)

    async def fetch_all(self) -> list[FetchOutcome]:
        """Fetch every show concurrently.

        Returns:
            One FetchOutcome per show, in registry order
        """
        semaphore = asyncio.Semaphore(self.max_concurrent_feeds)

        async def fetch_with_limit(show: Show) -> FetchOutcome:
            async with semaphore:
                return await self._fetch_show(show)

        tasks = [fetch_with_limit(show) for show in self.registry]
        outcomes = await asyncio.gather(*tasks)

        failed = sum(1 for outcome in outcomes if not outcome.success)
        logger.info("Fetched %d feeds (%d failed)", len(outcomes), failed)
        return list(outcomes)

    async def get_all_media(
        self, content_types: Iterable[ContentType] | None = None
    ) -> CatalogPage:
        """Collect every item from every show.

        Args:
            content_types: Optional filter; empty or None lets everything through

        Returns:
            CatalogPage of MediaItems, unordered across shows
        """
        wanted = set(content_types or ())

        # Everything this channel serves is a podcast.
        if wanted and ContentType.PODCAST not in wanted:
            return CatalogPage()

        outcomes = await self.fetch_all()
        items = [item for outcome in outcomes for item in outcome.items]

        if wanted:
            items = [item for item in items if item.content_type in wanted]

        return CatalogPage(items=items, total_count=len(items))

    async def get_latest_media(self, user_id: str | None = None) -> list[MediaItem]:
        """All items across shows, newest first.

        Args:
            user_id: Requesting user (accepted for the host contract, unused)

        Returns:
            MediaItems sorted descending by date_created, undated items last
        """
        page = await self.get_all_media()
        return sort_latest(page.items)

    async def fetch_latest(self) -> tuple[list[MediaItem], list[FetchOutcome]]:
        """Latest media together with the per-show outcomes behind it.

        Returns:
            Items sorted as by get_latest_media, and one FetchOutcome per show
        """
        outcomes = await self.fetch_all()
        items = sort_latest(item for outcome in outcomes for item in outcome.items)
        return items, outcomes
