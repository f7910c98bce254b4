"""
single feed download.

a feed that is down, slow or answering with an error page must never take the
whole aggregation with it, so every failure becomes a FeedFetchResult with an
error instead of an exception.
"""

from typing import Optional

import httpx

from verdade.models.config import FeedSettings
from verdade.models.news import FeedFetchResult, FeedSource
from verdade.news.encoding import decode_feed
from verdade.news.parser import parse_feed_items
from verdade.observability.logger import Stage, get_logger


logger = get_logger(__name__, Stage.FEED_FETCH)

FEED_ACCEPT = "application/rss+xml, application/xml;q=0.9, text/xml;q=0.8, */*;q=0.7"


def feed_headers(settings: FeedSettings) -> dict:
    # some outlets answer 403 to clients without a browser-like user agent
    return {
        "User-Agent": settings.user_agent,
        "Accept": FEED_ACCEPT,
    }


async def fetch_feed(
    client: httpx.AsyncClient,
    source: FeedSource,
    settings: Optional[FeedSettings] = None,
) -> FeedFetchResult:
    """
    download, decode and parse one feed.

    args:
        client: shared async client of the aggregation
        source: feed to download
        settings: aggregation settings (timeout, user agent, per feed cap)

    returns:
        FeedFetchResult with the parsed items, or with error set and no items
    """
    settings = settings or FeedSettings()

    try:
        response = await client.get(
            source.url,
            headers=feed_headers(settings),
            timeout=settings.timeout,
            follow_redirects=True,
        )
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        error = f"HTTP {e.response.status_code}"
        logger.warning(f"failed to fetch {source.name}: {error}")
        return FeedFetchResult(source=source, error=error)
    except httpx.TimeoutException:
        logger.warning(f"failed to fetch {source.name}: timeout after {settings.timeout}s")
        return FeedFetchResult(source=source, error="timeout")
    except httpx.HTTPError as e:
        error = f"{type(e).__name__}: {e}"
        logger.warning(f"failed to fetch {source.name}: {error}")
        return FeedFetchResult(source=source, error=error)

    # a feed that cannot be read is one more failed source, never a failed request
    try:
        text = decode_feed(
            response.content,
            content_type=response.headers.get("content-type"),
            override=source.encoding,
        )
        items = parse_feed_items(text, source.name, max_items=settings.max_items_per_source)
    except Exception as e:
        logger.exception(f"failed to read {source.name}")
        return FeedFetchResult(source=source, error=f"unreadable feed: {type(e).__name__}")

    logger.info(f"{source.name}: {len(items)} item(s)")
    return FeedFetchResult(source=source, items=items)
