"""
Rankings and aggregate stats caching with TTL support.
"""

import logging
from typing import Any, Callable

from cachetools import TTLCache

from mockdraft.config import STATS_CACHE_TTL_SECONDS

logger = logging.getLogger(__name__)

# TTL-based cache for computed stats, keyed by (event_id, kind)
_stats_cache: TTLCache = TTLCache(maxsize=256, ttl=STATS_CACHE_TTL_SECONDS)


def get_cached_stats(event_id: str, kind: str, compute: Callable[[], Any]) -> Any:
    """
    Return cached stats for an event, computing and caching them on a miss.

    Args:
        event_id: Event the stats belong to
        kind: Which stats ("rankings" or "aggregate")
        compute: Zero-argument callable producing the stats

    Returns:
        The cached or freshly computed stats
    """
    cache_key = (event_id, kind)

    if cache_key in _stats_cache:
        logger.info(f"Returning cached {kind} for event {event_id}")
        return _stats_cache[cache_key]

    logger.info(f"Computing fresh {kind} for event {event_id}")
    result = compute()
    _stats_cache[cache_key] = result
    return result


def invalidate_event_stats(event_id: str) -> None:
    """Drop every cached stat for an event after its picks or predictions change."""
    for cache_key in [key for key in list(_stats_cache.keys()) if key[0] == event_id]:
        _stats_cache.pop(cache_key, None)


def clear_stats_cache():
    """Clear the stats cache."""
    _stats_cache.clear()
    logger.info("Stats cache cleared")
