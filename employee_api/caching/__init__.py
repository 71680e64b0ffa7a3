"""
Cache implementations and the context that owns them.

All cache implementations implement the ICache interface, so the cache-aside
repositories can be handed any of them.
"""

from .lru_cache import CacheEntry, LRUCache
from .cache_context import CacheContext

__all__ = [
    "CacheEntry",
    "LRUCache",
    "CacheContext",
]
