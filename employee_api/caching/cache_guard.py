"""
Fault guards for cache calls made by the cache-aside repositories.

A cache that raises is logged and treated as empty, so lookups fall
through to storage instead of failing.
"""

import logging
from typing import Any, Hashable, Optional

from ..interfaces.cache import ICache

logger = logging.getLogger(__name__)


def safe_get(cache: ICache, key: Hashable) -> Optional[Any]:
    """Read from cache, returning None if the cache itself fails."""
    try:
        return cache.get(key)
    except Exception as e:
        logger.warning(f"Cache get failed for key {key!r}, treating as miss: {e}")
        return None


def safe_put(cache: ICache, key: Hashable, value: Any) -> None:
    """Write to cache, skipping the populate if the cache itself fails."""
    try:
        cache.put(key, value)
    except Exception as e:
        logger.warning(f"Cache put failed for key {key!r}, skipping populate: {e}")
