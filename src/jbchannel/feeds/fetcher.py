"""Feed fetching: HTTP retrieval plus RSS deserialization."""

import logging
from io import BytesIO
from typing import Any

import feedparser
import httpx
from feedparser.exceptions import CharacterEncodingOverride

from jbchannel.config.schema import HttpConfig
from jbchannel.feeds.models import FeedDocument, RawFeedEntry
from jbchannel.utils.errors import FeedUnavailableError

logger = logging.getLogger(__name__)


class FeedFetcher:
    """Fetches a feed URL and deserializes it into a FeedDocument.

    The fetcher either borrows an injected ``httpx.AsyncClient`` or lazily
    creates its own from ``HttpConfig``. Only an owned client is closed by
    ``aclose()``.

    Example:
        >>> async with FeedFetcher() as fetcher:
        ...     document = await fetcher.fetch("http://feeds.feedburner.com/BsdNowMp3")
        >>> print(len(document.entries))
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        config: HttpConfig | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            client: Optional shared HTTP client (not closed by this fetcher)
            config: HTTP settings used when the fetcher creates its own client
        """
        self.config = config or HttpConfig()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """HTTP client, created on first use when none was injected."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.config.timeout_seconds,
                follow_redirects=self.config.follow_redirects,
                headers={"User-Agent": self.config.user_agent},
            )
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "FeedFetcher":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def fetch(self, url: str, offset: int = 0) -> FeedDocument:
        """Fetch and deserialize a feed.

        ``offset`` is accepted for paging but currently ignored: the whole
        feed is always returned.

        Args:
            url: Feed URL
            offset: Paging offset (unused)

        Returns:
            FeedDocument with entries in document order

        Raises:
            FeedUnavailableError: On network failure, non-2xx status, or
                malformed XML
        """
        logger.debug("Fetching feed %s (offset=%d)", url, offset)

        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FeedUnavailableError(url, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise FeedUnavailableError(url, str(e) or type(e).__name__) from e

        document = parse_feed_document(url, response.content)
        logger.debug("Parsed %d entries from %s", len(document.entries), url)
        return document


def parse_feed_document(url: str, content: bytes) -> FeedDocument:
    """Deserialize raw feed bytes.

    Args:
        url: Source URL, used for error reporting
        content: Response body

    Returns:
        FeedDocument

    Raises:
        FeedUnavailableError: If the body is not a well-formed feed
    """
    # Show notes are passed through untouched.
    feed = feedparser.parse(
        BytesIO(content), sanitize_html=False, resolve_relative_uris=False
    )

    if feed.bozo and not isinstance(feed.bozo_exception, CharacterEncodingOverride):
        raise FeedUnavailableError(url, f"malformed feed: {feed.bozo_exception}")

    if not feed.get("version"):
        raise FeedUnavailableError(url, "not an RSS or Atom document")

    return FeedDocument(
        title=feed.feed.get("title", ""),
        entries=[_to_raw_entry(entry) for entry in feed.entries],
    )


def _to_raw_entry(entry: Any) -> RawFeedEntry:
    """Map a feedparser entry onto RawFeedEntry."""
    enclosures = entry.get("enclosures") or []
    enclosure_url = enclosures[0].get("href", "") if enclosures else ""

    return RawFeedEntry(
        title=entry.get("title", ""),
        enclosure_url=enclosure_url,
        pub_date=entry.get("published"),
        duration=entry.get("itunes_duration"),
        summary=entry.get("summary", ""),
    )
