"""
Core interface abstractions.

Repositories, caches and the connection manager are consumed through these
contracts, so cached and uncached stores are interchangeable.
"""

from .cache import ICache, CacheStats
from .database import IConnectionManager
from .repository import IEmployeeStore, IDepartmentStore, SalaryStatistics

__all__ = [
    "ICache",
    "CacheStats",
    "IConnectionManager",
    "IEmployeeStore",
    "IDepartmentStore",
    "SalaryStatistics",
]
