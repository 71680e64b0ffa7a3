"""Cache statistics reporting"""
import logging
from typing import Dict

from pydantic import BaseModel, computed_field

from ..caching.cache_context import CacheContext
from ..interfaces.cache import CacheStats

logger = logging.getLogger(__name__)


class CacheStatisticsReport(BaseModel):
    """Per-cache snapshots plus totals across all caches"""
    caches: Dict[str, CacheStats]

    @computed_field
    @property
    def total_requests(self) -> int:
        return sum(s.requests for s in self.caches.values())

    @computed_field
    @property
    def total_hits(self) -> int:
        return sum(s.hits for s in self.caches.values())

    @computed_field
    @property
    def total_misses(self) -> int:
        return sum(s.misses for s in self.caches.values())

    @computed_field
    @property
    def total_evictions(self) -> int:
        return sum(s.evictions for s in self.caches.values())

    @computed_field
    @property
    def overall_hit_rate(self) -> float:
        requests = self.total_requests
        return self.total_hits / requests if requests > 0 else 0.0


class CacheStatisticsReporter:
    """
    Read-only view over the caches of a CacheContext.

    Holds no state of its own; every report is built from fresh snapshots.
    """

    def __init__(self, context: CacheContext):
        self.context = context

    def report(self) -> CacheStatisticsReport:
        """
        Snapshot every cache.

        Returns:
            CacheStatisticsReport keyed by cache name
        """
        return CacheStatisticsReport(
            caches={name: cache.get_stats() for name, cache in self.context.caches().items()}
        )

    def reset(self, reset_counters: bool = False) -> None:
        """
        Clear every cache.

        Args:
            reset_counters: Also zero the counters; entries are always cleared
        """
        self.context.clear_all(reset_counters=reset_counters)

    def format_report(self) -> str:
        """Human-readable multi-line summary."""
        report = self.report()
        lines = ["=== Cache Statistics ==="]
        for name, stats in report.caches.items():
            lines.append(
                f"{name}: size={stats.current_size}/{stats.max_size}, "
                f"requests={stats.requests}, "
                f"hit={stats.hit_rate:.2%}, miss={stats.miss_rate:.2%}, "
                f"evictions={stats.evictions}"
            )
        lines.append(
            f"total: requests={report.total_requests}, "
            f"hit={report.overall_hit_rate:.2%}, evictions={report.total_evictions}"
        )
        return "\n".join(lines)

    def log_report(self) -> None:
        """Write the summary to the log at INFO."""
        for line in self.format_report().splitlines():
            logger.info(line)
