"""
LRU (Least Recently Used) cache with expire-after-write TTL.

Uses OrderedDict for O(1) access and LRU ordering, and a single lock so it
can be shared by every request thread.
"""

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional, OrderedDict as OrderedDictType

from ..interfaces.cache import ICache, CacheStats

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """Cached value plus the monotonic time it was written"""
    key: Hashable
    value: Any
    cached_at: float

    def is_expired(self, now: float, ttl_seconds: float) -> bool:
        """Check if entry has outlived the TTL."""
        return now - self.cached_at >= ttl_seconds


class LRUCache(ICache):
    """
    Bounded, time-expiring LRU cache.

    Features:
    - O(1) get/put operations
    - LRU eviction when max_size is reached
    - Entries expire ttl_seconds after they were written; reads do not
      extend their life
    - requests/hits/misses/evictions counters
    - Thread-safe: every operation runs under one lock

    Expired entries are dropped lazily, on the read that finds them or when
    they reach the LRU end during eviction. Neither counts as an eviction.
    """

    def __init__(
        self,
        max_size: int,
        ttl_seconds: float,
        name: str = "cache",
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize LRU cache.

        Args:
            max_size: Maximum number of entries (at least 1)
            ttl_seconds: Time to live after write, in seconds (positive)
            name: Label used in stats and logs
            clock: Monotonic time source, injectable for tests
        """
        if max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")

        self._cache: OrderedDictType[Hashable, CacheEntry] = OrderedDict()
        self._max_size = max_size
        self._ttl_seconds = ttl_seconds
        self._name = name
        self._clock = clock
        self._lock = threading.Lock()

        # Statistics tracking
        self._requests = 0
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def ttl_seconds(self) -> float:
        return self._ttl_seconds

    def get(self, key: Hashable) -> Optional[Any]:
        """
        Retrieve value from cache with LRU tracking.

        Args:
            key: Cache key

        Returns:
            Cached value or None if not found or expired
        """
        with self._lock:
            self._requests += 1
            entry = self._cache.get(key)

            if entry is not None:
                if entry.is_expired(self._clock(), self._ttl_seconds):
                    del self._cache[key]
                else:
                    # Cache hit - move to end (most recently used)
                    self._cache.move_to_end(key)
                    self._hits += 1
                    return entry.value

            self._misses += 1
            return None

    def put(self, key: Hashable, value: Any) -> None:
        """
        Store value in cache with LRU eviction if needed.

        Args:
            key: Cache key
            value: Value to cache
        """
        entry = CacheEntry(key=key, value=value, cached_at=self._clock())

        with self._lock:
            # Overwrite resets age and recency
            if key in self._cache:
                del self._cache[key]
            elif len(self._cache) >= self._max_size:
                self._evict_lru(entry.cached_at)

            self._cache[key] = entry

    def invalidate(self, key: Hashable) -> None:
        """
        Remove specific key from cache.

        Args:
            key: Cache key to remove
        """
        with self._lock:
            self._cache.pop(key, None)

    def invalidate_all(self) -> None:
        """Clear all entries from cache. Counters are kept."""
        with self._lock:
            self._cache.clear()

    def reset_stats(self) -> None:
        """Zero the request/hit/miss/eviction counters."""
        with self._lock:
            self._requests = 0
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def get_stats(self) -> CacheStats:
        """
        Get cache performance statistics.

        Returns:
            CacheStats snapshot taken under the lock
        """
        with self._lock:
            return CacheStats(
                name=self._name,
                requests=self._requests,
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
                current_size=len(self._cache),
                max_size=self._max_size,
            )

    def get_size(self) -> int:
        """Get current number of entries, expired ones included."""
        with self._lock:
            return len(self._cache)

    def _evict_lru(self, now: float) -> None:
        """Evict the least recently used item (first item in OrderedDict)."""
        if not self._cache:
            return
        _, victim = self._cache.popitem(last=False)

        # An already-expired victim is an expiry, not a capacity eviction
        if not victim.is_expired(now, self._ttl_seconds):
            self._evictions += 1
            logger.debug(f"[{self._name}] evicted key {victim.key!r} for capacity")
