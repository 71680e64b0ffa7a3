"""
Shared fixtures: an in-memory SQLite database seeded with a small company,
a controllable clock for TTL tests, and call-counting store doubles.
"""

from collections import Counter
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

import pytest

from employee_api.config import Settings
from employee_api.interfaces.repository import IDepartmentStore, IEmployeeStore, SalaryStatistics
from employee_api.models.employee import Department, Employee
from employee_api.repositories.department_repository import DepartmentRepository
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.database_service import DatabaseService


DEPARTMENTS = [
    Department(id=1, name="Engineering", location="Berlin", manager_id=1),
    Department(id=2, name="Sales", location="Lisbon", manager_id=3),
    Department(id=3, name="Research", location=None, manager_id=None),
]

EMPLOYEES = [
    Employee(id=1, name="John Smith", email="john.smith@example.com", department_id=1,
             salary=Decimal("100000.00"), hire_date=date(2020, 1, 15)),
    Employee(id=2, name="Johnny Walker", email="johnny.walker@example.com", department_id=1,
             salary=Decimal("80000.50"), hire_date=date(2021, 6, 1)),
    Employee(id=3, name="Bojo Jones", email="bojo.jones@example.com", department_id=2,
             salary=Decimal("60000.00"), hire_date=date(2020, 3, 3)),
    Employee(id=4, name="Ann_Marie Lee", email="ann.lee@example.com", department_id=2,
             salary=Decimal("50000.00"), hire_date=None),
    Employee(id=5, name="Annie Hall", email="annie.hall@example.com", department_id=2,
             salary=None, hire_date=date(2022, 2, 2)),
    # Points at a department that does not exist
    Employee(id=42, name="Douglas Adams", email="douglas.adams@example.com", department_id=99,
             salary=Decimal("42000.00"), hire_date=date(2019, 9, 9)),
]


class FakeClock:
    """Manually advanced monotonic clock"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CountingEmployeeStore(IEmployeeStore):
    """In-memory employee store that records every call"""

    def __init__(self, employees: List[Employee]):
        self.employees = {e.id: e for e in employees}
        self.calls = Counter()
        self.error: Optional[Exception] = None

    def _record(self, operation: str) -> None:
        self.calls[operation] += 1
        if self.error is not None:
            raise self.error

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        self._record("find_by_id")
        return self.employees.get(employee_id)

    def search_by_name(self, term: str) -> List[Employee]:
        self._record("search_by_name")
        prefix = term.lower()
        return [e for _, e in sorted(self.employees.items()) if e.name.lower().startswith(prefix)]

    def find_by_department_id(self, department_id: int) -> List[Employee]:
        self._record("find_by_department_id")
        return [e for _, e in sorted(self.employees.items()) if e.department_id == department_id]

    def count_by_department_id(self, department_id: int) -> int:
        self._record("count_by_department_id")
        return sum(1 for e in self.employees.values() if e.department_id == department_id)

    def get_total_count(self) -> int:
        self._record("get_total_count")
        return len(self.employees)

    def average_salary(self, department_id: Optional[int] = None) -> Decimal:
        self._record("average_salary")
        return Decimal("0.00")

    def salary_statistics(self, department_id: int) -> SalaryStatistics:
        self._record("salary_statistics")
        return SalaryStatistics()

    def count_by_hire_year(self, department_id: int) -> Dict[int, int]:
        self._record("count_by_hire_year")
        return {}


class CountingDepartmentStore(IDepartmentStore):
    """In-memory department store that records every call"""

    def __init__(self, departments: List[Department]):
        self.departments = {d.id: d for d in departments}
        self.calls = Counter()

    def find_by_id(self, department_id: int) -> Optional[Department]:
        self.calls["find_by_id"] += 1
        return self.departments.get(department_id)

    def find_all(self) -> List[Department]:
        self.calls["find_all"] += 1
        return [d for _, d in sorted(self.departments.items())]


@pytest.fixture
def clock():
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def test_settings():
    """Settings pointing at an in-memory database, ignoring any .env file."""
    return Settings(_env_file=None, database_url="sqlite:///:memory:", log_level="DEBUG")


@pytest.fixture
def db_service():
    """Create a connected, seeded in-memory database service."""
    service = DatabaseService(database_url="sqlite:///:memory:")
    service.connect()
    service.initialize_schema()
    service.seed(DEPARTMENTS, EMPLOYEES)
    yield service
    service.disconnect()


@pytest.fixture
def employee_repository(db_service):
    """Create an employee repository over the test database."""
    return EmployeeRepository(db_service)


@pytest.fixture
def department_repository(db_service):
    """Create a department repository over the test database."""
    return DepartmentRepository(db_service)


@pytest.fixture
def counting_employee_store():
    """Create a call-counting employee store seeded with the sample employees."""
    return CountingEmployeeStore(EMPLOYEES)


@pytest.fixture
def counting_department_store():
    """Create a call-counting department store seeded with the sample departments."""
    return CountingDepartmentStore(DEPARTMENTS)
