"""
CacheContext owns the four caches used by the cache-aside repositories.

Built once at process start, handed to whichever component needs cache
access, and closed at process stop. There are no module-level cache
singletons.
"""

import logging
from typing import TYPE_CHECKING, Dict, Optional

from ..config import Settings
from ..interfaces.cache import ICache
from .lru_cache import LRUCache

if TYPE_CHECKING:
    from ..services.statistics_service import CacheStatisticsReporter

logger = logging.getLogger(__name__)

EMPLOYEE_CACHE = "employee"
DEPARTMENT_CACHE = "department"
DEPARTMENT_LIST_CACHE = "department_list"
SEARCH_CACHE = "search"

# Key of the single entry in the department list cache
DEPARTMENT_LIST_KEY = "all"


class CacheContext:
    """
    Holder for the employee, department, department-list and search caches.

    Lifecycle:
        context = CacheContext.from_settings(settings)
        context.initialize()
        ...
        context.close()
    """

    def __init__(
        self,
        employee_cache: ICache,
        department_cache: ICache,
        department_list_cache: ICache,
        search_cache: ICache
    ):
        self.employee_cache = employee_cache
        self.department_cache = department_cache
        self.department_list_cache = department_list_cache
        self.search_cache = search_cache
        self._initialized = False
        self._closed = False

    @classmethod
    def from_settings(cls, settings: Settings, clock=None) -> "CacheContext":
        """
        Build the four caches from configuration.

        Args:
            settings: Application settings (sizes in entries, TTLs in minutes)
            clock: Optional time source shared by all caches (tests)

        Returns:
            A CacheContext that still needs initialize()
        """
        settings.validate_cache_settings()
        clock_kwargs = {"clock": clock} if clock is not None else {}

        return cls(
            employee_cache=LRUCache(
                max_size=settings.cache_employee_max_size,
                ttl_seconds=settings.cache_employee_ttl_minutes * 60,
                name=EMPLOYEE_CACHE,
                **clock_kwargs
            ),
            department_cache=LRUCache(
                max_size=settings.cache_department_max_size,
                ttl_seconds=settings.cache_department_ttl_minutes * 60,
                name=DEPARTMENT_CACHE,
                **clock_kwargs
            ),
            department_list_cache=LRUCache(
                max_size=1,
                ttl_seconds=settings.cache_department_list_ttl_minutes * 60,
                name=DEPARTMENT_LIST_CACHE,
                **clock_kwargs
            ),
            search_cache=LRUCache(
                max_size=settings.cache_search_max_size,
                ttl_seconds=settings.cache_search_ttl_minutes * 60,
                name=SEARCH_CACHE,
                **clock_kwargs
            ),
        )

    def caches(self) -> Dict[str, ICache]:
        """All caches keyed by their report name, in a stable order."""
        return {
            EMPLOYEE_CACHE: self.employee_cache,
            DEPARTMENT_CACHE: self.department_cache,
            DEPARTMENT_LIST_CACHE: self.department_list_cache,
            SEARCH_CACHE: self.search_cache,
        }

    @property
    def is_initialized(self) -> bool:
        return self._initialized and not self._closed

    def initialize(self) -> None:
        """Mark the context ready and log each cache's configuration."""
        if self._initialized:
            return
        logger.info("Initializing cache layer...")
        for name, cache in self.caches().items():
            stats = cache.get_stats()
            ttl = getattr(cache, "ttl_seconds", None)
            ttl_text = f"{ttl / 60:g} min" if ttl is not None else "n/a"
            logger.info(f"  {name} cache: max={stats.max_size} entries, TTL={ttl_text}")
        self._initialized = True
        self._closed = False
        logger.info("Cache layer initialized")

    def clear_all(self, reset_counters: bool = False) -> None:
        """
        Invalidate every entry in every cache.

        Args:
            reset_counters: Also zero the hit/miss/eviction counters
        """
        for cache in self.caches().values():
            cache.invalidate_all()
            if reset_counters:
                cache.reset_stats()
        logger.info(f"All caches cleared (counters reset: {reset_counters})")

    def close(self, reporter: Optional["CacheStatisticsReporter"] = None) -> None:
        """
        Log final statistics and drop all entries.

        Args:
            reporter: Reporter used for the final summary; one is built if omitted
        """
        if self._closed:
            return
        from ..services.statistics_service import CacheStatisticsReporter

        logger.info("Closing cache layer...")
        (reporter or CacheStatisticsReporter(self)).log_report()
        self.clear_all()
        self._closed = True
        logger.info("Cache layer closed")
