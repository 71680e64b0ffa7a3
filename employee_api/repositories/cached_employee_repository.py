"""
CachedEmployeeRepository - cache-aside wrapper around an employee store.

Lookup strategy for cached operations:
1. Check cache first
2. Fall back to the wrapped store on a miss
3. Populate the cache with non-empty results only

Aggregates and per-department listings always go straight to the store.
"""

import logging
from decimal import Decimal
from typing import Dict, List, Optional

from ..caching.cache_guard import safe_get, safe_put
from ..interfaces.cache import ICache
from ..interfaces.repository import IEmployeeStore, SalaryStatistics
from ..models.employee import Employee

logger = logging.getLogger(__name__)


def normalize_search_key(term: str) -> str:
    """Cache key for a name search; "John" and "john" share a slot."""
    return term.lower()


class CachedEmployeeRepository(IEmployeeStore):
    """
    Employee store with read-through caching for id lookups and name search.

    Storage errors raised by the wrapped store propagate unchanged.
    """

    def __init__(self, store: IEmployeeStore, employee_cache: ICache, search_cache: ICache):
        """
        Initialize repository.

        Args:
            store: Underlying employee store
            employee_cache: Cache keyed by employee id
            search_cache: Cache keyed by lowercased search term
        """
        self.store = store
        self.employee_cache = employee_cache
        self.search_cache = search_cache

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        cached = safe_get(self.employee_cache, employee_id)
        if cached is not None:
            logger.debug(f"Employee cache hit: {employee_id}")
            return cached

        logger.debug(f"Employee cache miss: {employee_id}")
        employee = self.store.find_by_id(employee_id)
        if employee is not None:
            safe_put(self.employee_cache, employee_id, employee)
        return employee

    def search_by_name(self, term: str) -> List[Employee]:
        key = normalize_search_key(term)
        cached = safe_get(self.search_cache, key)
        if cached is not None:
            logger.debug(f"Search cache hit: {key!r}")
            return list(cached)

        logger.debug(f"Search cache miss: {key!r}")
        results = self.store.search_by_name(key)
        if results:
            # Stored as a tuple so callers cannot alter the cached entry
            safe_put(self.search_cache, key, tuple(results))
        return results

    def find_by_department_id(self, department_id: int) -> List[Employee]:
        return self.store.find_by_department_id(department_id)

    def count_by_department_id(self, department_id: int) -> int:
        return self.store.count_by_department_id(department_id)

    def get_total_count(self) -> int:
        return self.store.get_total_count()

    def average_salary(self, department_id: Optional[int] = None) -> Decimal:
        return self.store.average_salary(department_id)

    def salary_statistics(self, department_id: int) -> SalaryStatistics:
        return self.store.salary_statistics(department_id)

    def count_by_hire_year(self, department_id: int) -> Dict[int, int]:
        return self.store.count_by_hire_year(department_id)
