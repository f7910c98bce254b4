from .default import (
    get_default_gateway_config,
    get_feed_settings,
    get_store_settings,
    is_gateway_configured,
)
from .feeds import DEFAULT_CATEGORY, RSS_FEEDS, get_category_feeds, resolve_category

__all__ = [
    "get_default_gateway_config",
    "get_feed_settings",
    "get_store_settings",
    "is_gateway_configured",
    "DEFAULT_CATEGORY",
    "RSS_FEEDS",
    "get_category_feeds",
    "resolve_category",
]
