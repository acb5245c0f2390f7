"""Shared fixtures for jbchannel tests."""

from collections.abc import Callable
from xml.sax.saxutils import escape, quoteattr

import httpx
import pytest

from jbchannel.catalog.registry import ShowRegistry

RSS_HEADER = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<rss version="2.0" xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd">\n'
    "<channel>\n"
)
RSS_FOOTER = "</channel>\n</rss>\n"


def _render_item(item: dict) -> str:
    parts = ["<item>"]
    if "title" in item:
        parts.append(f"<title>{escape(item['title'])}</title>")
    if item.get("url") is not None:
        parts.append(
            f"<enclosure url={quoteattr(item['url'])} length=\"1000\" type=\"audio/mpeg\"/>"
        )
    if item.get("pub_date") is not None:
        parts.append(f"<pubDate>{escape(item['pub_date'])}</pubDate>")
    if item.get("duration") is not None:
        parts.append(f"<itunes:duration>{escape(item['duration'])}</itunes:duration>")
    if item.get("summary") is not None:
        parts.append(f"<description>{escape(item['summary'])}</description>")
    parts.append("</item>")
    return "".join(parts)


@pytest.fixture
def make_rss() -> Callable[..., bytes]:
    """Build RSS 2.0 feed bytes from item dicts.

    Item keys: title, url, pub_date, duration, summary (all optional).
    """

    def _make_rss(items: list[dict], title: str = "Test Show") -> bytes:
        body = "".join(_render_item(item) + "\n" for item in items)
        return (RSS_HEADER + f"<title>{escape(title)}</title>\n" + body + RSS_FOOTER).encode(
            "utf-8"
        )

    return _make_rss


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient backed by httpx.MockTransport.

    ``routes`` maps URL to either response bytes, an ``(status, bytes)``
    tuple, or an exception instance to raise. Unknown URLs get a 404.
    Every requested URL is appended to ``client.requested``.
    """

    def _make_client(routes: dict) -> httpx.AsyncClient:
        requested: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            requested.append(url)
            route = routes.get(url)
            if route is None:
                return httpx.Response(404, request=request)
            if isinstance(route, Exception):
                raise route
            if isinstance(route, tuple):
                status, content = route
                return httpx.Response(status, content=content, request=request)
            return httpx.Response(200, content=route, request=request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        client.requested = requested  # type: ignore[attr-defined]
        return client

    return _make_client


@pytest.fixture
def registry() -> ShowRegistry:
    """The built-in show registry."""
    return ShowRegistry()


@pytest.fixture
def sample_items() -> list[dict]:
    """Three episodes covering dated, undated and duration-less entries."""
    return [
        {
            "title": "Episode 3",
            "url": "https://cdn.example.com/ep3.mp3",
            "pub_date": "Wed, 03 Jan 2024 12:00:00 GMT",
            "duration": "1:02:03",
            "summary": "Third episode.",
        },
        {
            "title": "Episode 2",
            "url": "https://cdn.example.com/ep2.mp3",
            "pub_date": "Tue, 02 Jan 2024 12:00:00 GMT",
            "summary": "Second episode.",
        },
        {
            "title": "Episode 1",
            "url": "https://cdn.example.com/ep1.mp3",
            "duration": "45:30",
            "summary": "First episode.",
        },
    ]


@pytest.fixture
def sample_config_dict() -> dict:
    """Sample config.yaml contents."""
    return {
        "version": "1",
        "log_level": "INFO",
        "http": {"timeout_seconds": 10.0, "user_agent": "test-agent"},
        "aggregation": {"max_concurrent_feeds": 4},
    }
