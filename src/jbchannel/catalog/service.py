"""Catalog browsing: the show list and a single show's episodes."""

import logging

from jbchannel.catalog.models import CatalogPage, ChannelQuery, FolderItem
from jbchannel.catalog.normalizer import normalize_document
from jbchannel.catalog.registry import ShowRegistry
from jbchannel.feeds.fetcher import FeedFetcher

logger = logging.getLogger(__name__)


class CatalogService:
    """Resolves browse requests against the registry and the feeds.

    Example:
        >>> service = CatalogService(ShowRegistry(), FeedFetcher())
        >>> page = service.list_shows()
        >>> page.total_count
        11
    """

    def __init__(self, registry: ShowRegistry, fetcher: FeedFetcher) -> None:
        self.registry = registry
        self.fetcher = fetcher

    def list_shows(self) -> CatalogPage:
        """List every show as a folder, in registry order."""
        folders = [
            FolderItem(id=show.id, name=show.display_name, image_url=show.artwork_url)
            for show in self.registry
        ]
        return CatalogPage(items=folders, total_count=len(self.registry))

    async def list_episodes(self, show_id: str, start_index: int | None = None) -> CatalogPage:
        """List every episode of one show.

        ``start_index`` is accepted but paging is not implemented: the
        full feed is always returned.

        Args:
            show_id: Registry id of the show
            start_index: Requested page offset (unused)

        Returns:
            CatalogPage of MediaItems in feed order

        Raises:
            UnknownShowError: If the id is unknown or the show has no feed
            FeedUnavailableError: If the feed cannot be fetched or parsed
        """
        logger.debug("Getting episodes for show: %s", show_id)

        feed_url = self.registry.feed_url_for(show_id)
        show = self.registry.get(show_id)

        document = await self.fetcher.fetch(feed_url, start_index or 0)
        items = normalize_document(document, show)

        return CatalogPage(items=items, total_count=len(items))

    async def get_items(self, query: ChannelQuery) -> CatalogPage:
        """Route a browse request: no folder lists shows, a folder lists episodes."""
        if query.folder_id is None:
            return self.list_shows()
        return await self.list_episodes(query.folder_id, query.start_index)
