"""Registry of Jupiter Broadcasting shows.

A single ordered table maps show ids to display names, feed URLs and
artwork. Lookups work in both directions (id to show, feed URL to show).
"""

from collections.abc import Iterable, Iterator

from jbchannel.catalog.models import Show
from jbchannel.utils.errors import UnknownShowError

ARTWORK_BASE_URL = (
    "https://raw.githubusercontent.com/DaBungalow/"
    "MediaBrowser.Channels.JupiterBroadcasting/master/Resources/images/"
)

# Feeds that used to be aggregated but no longer map to any show.
RETIRED_FEED_URLS: tuple[str, ...] = ("http://feeds.feedburner.com/techsnaphd",)


def artwork_url_for(show_id: str) -> str:
    """Artwork URL for a show, derived from its id."""
    return f"{ARTWORK_BASE_URL}{show_id}.jpg"


def _show(show_id: str, display_name: str, feed_url: str | None) -> Show:
    return Show(
        id=show_id,
        display_name=display_name,
        feed_url=feed_url,
        artwork_url=artwork_url_for(show_id),
    )


# Order is part of the external contract: list_shows returns shows in this order.
# "howto" has never had a feed URL.
DEFAULT_SHOWS: tuple[Show, ...] = (
    _show("faux", "FauxShow", "http://www.jupiterbroadcasting.com/feeds/FauxShowMP3.xml"),
    _show("scibyte", "SciByte", "http://feeds.feedburner.com/scibyteaudio"),
    _show("unfilter", "Unfilter", "http://www.jupiterbroadcasting.com/feeds/unfilterMP3.xml"),
    _show("techsnap", "TechSNAP", "http://feeds.feedburner.com/techsnapmp3"),
    _show("howto", "HowTo Linux", None),
    _show("bsd", "BSD Now", "http://feeds.feedburner.com/BsdNowMp3"),
    _show("las", "Linux Action Show", "http://feeds2.feedburner.com/TheLinuxActionShow"),
    _show("coder", "Coder Radio", "http://feeds.feedburner.com/coderradiomp3"),
    _show("unplugged", "Linux Unplugged", "http://feeds.feedburner.com/linuxunplugged"),
    _show("techtalk", "Tech Talk Today", "http://feedpress.me/t3mp3"),
    _show("wtr", "Women in Tech Radio", "http://feeds.feedburner.com/wtrmp3"),
)


class ShowRegistry:
    """Immutable, ordered collection of shows.

    Example:
        >>> registry = ShowRegistry()
        >>> registry.get("bsd").display_name
        'BSD Now'
        >>> registry.by_feed_url("http://feeds.feedburner.com/BsdNowMp3").id
        'bsd'
    """

    def __init__(self, shows: Iterable[Show] = DEFAULT_SHOWS) -> None:
        self._shows = tuple(shows)
        self._by_id: dict[str, Show] = {}
        self._by_feed_url: dict[str, Show] = {}

        for show in self._shows:
            if show.id in self._by_id:
                raise ValueError(f"Duplicate show id in registry: {show.id}")
            self._by_id[show.id] = show
            if show.feed_url:
                self._by_feed_url[show.feed_url] = show

    def __iter__(self) -> Iterator[Show]:
        return iter(self._shows)

    def __len__(self) -> int:
        return len(self._shows)

    def __contains__(self, show_id: object) -> bool:
        return show_id in self._by_id

    @property
    def shows(self) -> tuple[Show, ...]:
        return self._shows

    def get(self, show_id: str) -> Show:
        """Look up a show by id.

        Raises:
            UnknownShowError: If no show has this id
        """
        try:
            return self._by_id[show_id]
        except KeyError:
            raise UnknownShowError(show_id) from None

    def feed_url_for(self, show_id: str) -> str:
        """Resolve a show id to its feed URL.

        Raises:
            UnknownShowError: If the id is unknown or the show has no feed
        """
        show = self.get(show_id)
        if not show.feed_url:
            raise UnknownShowError(show_id, "show has no feed URL")
        return show.feed_url

    def by_feed_url(self, feed_url: str) -> Show:
        """Look up a show by its feed URL.

        Provided for host callers that hold a feed URL, such as an item's
        originating feed; aggregation itself iterates the shows.

        Raises:
            UnknownShowError: If no show publishes this feed
        """
        try:
            return self._by_feed_url[feed_url]
        except KeyError:
            raise UnknownShowError(None, f"no show for feed {feed_url}") from None

    def feed_urls(self) -> list[str]:
        """Feed URLs of every show that has one, in registry order.

        Provided for host callers; shows without a feed are left out.
        """
        return [show.feed_url for show in self._shows if show.feed_url]
