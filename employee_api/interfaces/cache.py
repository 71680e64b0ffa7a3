"""
Cache interface - unified contract for the bounded, expiring caches.
"""

from abc import ABC, abstractmethod
from typing import Any, Hashable, Optional

from pydantic import BaseModel, computed_field


class CacheStats(BaseModel):
    """
    Point-in-time statistics for one cache instance.

    requests always equals hits + misses. evictions counts capacity
    evictions only, never TTL expiry or explicit invalidation.
    """
    name: str = ""
    requests: int = 0
    hits: int = 0
    misses: int = 0
    evictions: int = 0
    current_size: int = 0
    max_size: int = 0

    @computed_field
    @property
    def hit_rate(self) -> float:
        """Calculate cache hit rate"""
        return self.hits / self.requests if self.requests > 0 else 0.0

    @computed_field
    @property
    def miss_rate(self) -> float:
        """Calculate cache miss rate"""
        return self.misses / self.requests if self.requests > 0 else 0.0


class ICache(ABC):
    """
    Cache capability used by the cache-aside repositories.

    Implementations are best-effort: absence is always a valid answer and no
    operation raises for a key that is unknown, expired or evicted.
    """

    @abstractmethod
    def get(self, key: Hashable) -> Optional[Any]:
        """
        Retrieve value from cache.

        Args:
            key: Cache key

        Returns:
            Cached value or None if absent, expired or evicted
        """
        pass

    @abstractmethod
    def put(self, key: Hashable, value: Any) -> None:
        """
        Store value in cache, replacing any existing entry and resetting its age.

        Args:
            key: Cache key
            value: Value to cache
        """
        pass

    @abstractmethod
    def invalidate(self, key: Hashable) -> None:
        """
        Remove a specific key from cache.

        Args:
            key: Cache key to remove
        """
        pass

    @abstractmethod
    def invalidate_all(self) -> None:
        """Remove every entry from cache."""
        pass

    @abstractmethod
    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats snapshot
        """
        pass

    @abstractmethod
    def reset_stats(self) -> None:
        """Zero the request/hit/miss/eviction counters."""
        pass
