"""
multi-source news aggregation.

every feed of the category is fetched concurrently; the per-feed results are
then folded into one list, keeping successes and discarding failures, sorted
newest first and truncated.
"""

import asyncio
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Tuple

import httpx
from dateutil import parser as date_parser

from verdade.config.default import get_feed_settings
from verdade.config.feeds import get_category_feeds, resolve_category
from verdade.models.config import FeedSettings
from verdade.models.news import AggregationResult, FeedFetchResult, NewsItem
from verdade.news.fetcher import fetch_feed
from verdade.observability.logger import Stage, get_logger, time_profile


logger = get_logger(__name__, Stage.AGGREGATION)


def parse_pub_date(value: str) -> Optional[datetime]:
    """
    parse a feed date (RFC 822, ISO 8601 and the usual variants).

    naive dates are taken as UTC so they compare with aware ones.

    returns:
        aware datetime, or None when the value cannot be parsed
    """
    try:
        parsed = date_parser.parse(value)
    except (ValueError, OverflowError):
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _sort_key(item: NewsItem) -> Tuple[int, float]:
    parsed = parse_pub_date(item.pubDate)
    if parsed is None:
        # unparseable dates end up after every dated item
        return (0, 0.0)
    return (1, parsed.timestamp())


def sort_by_date(items: Iterable[NewsItem]) -> List[NewsItem]:
    """newest first; python's sort is stable so ties keep fetch order"""
    return sorted(items, key=_sort_key, reverse=True)


def fold_results(results: Iterable[FeedFetchResult]) -> Tuple[List[NewsItem], List[str]]:
    """
    merge per-feed results in table order.

    returns:
        (items of every successful feed, names of the failed feeds)
    """
    items: List[NewsItem] = []
    failed: List[str] = []
    for result in results:
        if result.ok:
            items.extend(result.items)
        else:
            failed.append(result.source.name)
    return items, failed


@time_profile(Stage.AGGREGATION)
async def aggregate_news(
    category: Optional[str],
    settings: Optional[FeedSettings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> AggregationResult:
    """
    fetch the latest news of a category from all its feeds.

    never fails because of a feed: when every feed is down the result simply
    has no news.

    args:
        category: requested category; unknown or missing means "geral"
        settings: aggregation settings (defaults from the environment)
        client: optional shared client, mainly for tests

    returns:
        AggregationResult with the resolved category and at most
        settings.max_items items
    """
    settings = settings or get_feed_settings()
    resolved = resolve_category(category)
    feeds = get_category_feeds(resolved)

    logger.info(f"fetching {len(feeds)} feed(s) for category '{resolved}'")

    if client is None:
        async with httpx.AsyncClient() as own_client:
            results = await asyncio.gather(*(fetch_feed(own_client, feed, settings) for feed in feeds))
    else:
        results = await asyncio.gather(*(fetch_feed(client, feed, settings) for feed in feeds))

    items, failed = fold_results(results)
    news = sort_by_date(items)[:settings.max_items]

    if failed:
        logger.warning(f"{len(failed)} feed(s) failed: {', '.join(failed)}")
    logger.info(f"returning {len(news)} of {len(items)} item(s) for category '{resolved}'")

    return AggregationResult(category=resolved, news=news, failed_sources=failed)
