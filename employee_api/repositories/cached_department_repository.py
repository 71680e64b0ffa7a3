"""CachedDepartmentRepository - cache-aside wrapper around a department store"""

import logging
from typing import List, Optional

from ..caching.cache_context import DEPARTMENT_LIST_KEY
from ..caching.cache_guard import safe_get, safe_put
from ..interfaces.cache import ICache
from ..interfaces.repository import IDepartmentStore
from ..models.employee import Department

logger = logging.getLogger(__name__)


class CachedDepartmentRepository(IDepartmentStore):
    """
    Department store with read-through caching.

    The full listing is held as a single entry under a fixed key in its own
    one-slot cache.
    """

    def __init__(self, store: IDepartmentStore, department_cache: ICache, department_list_cache: ICache):
        self.store = store
        self.department_cache = department_cache
        self.department_list_cache = department_list_cache

    def find_by_id(self, department_id: int) -> Optional[Department]:
        cached = safe_get(self.department_cache, department_id)
        if cached is not None:
            logger.debug(f"Department cache hit: {department_id}")
            return cached

        logger.debug(f"Department cache miss: {department_id}")
        department = self.store.find_by_id(department_id)
        if department is not None:
            safe_put(self.department_cache, department_id, department)
        return department

    def find_all(self) -> List[Department]:
        cached = safe_get(self.department_list_cache, DEPARTMENT_LIST_KEY)
        if cached is not None:
            logger.debug("Department list cache hit")
            return list(cached)

        logger.debug("Department list cache miss")
        departments = self.store.find_all()
        if departments:
            safe_put(self.department_list_cache, DEPARTMENT_LIST_KEY, tuple(departments))
        return departments
