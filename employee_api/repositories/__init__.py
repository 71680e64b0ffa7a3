from .employee_repository import EmployeeRepository
from .department_repository import DepartmentRepository
from .cached_employee_repository import CachedEmployeeRepository
from .cached_department_repository import CachedDepartmentRepository

__all__ = [
    "EmployeeRepository",
    "DepartmentRepository",
    "CachedEmployeeRepository",
    "CachedDepartmentRepository",
]
