"""
Repository interfaces - abstract employee and department data access.

Both the plain SQL-backed stores and their cache-aside wrappers implement
these, so callers never know which one they were given.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel

from ..models.employee import Department, Employee


class SalaryStatistics(BaseModel):
    """Aggregate salary figures for one department"""
    min_salary: Optional[Decimal] = None
    max_salary: Optional[Decimal] = None
    average_salary: Decimal = Decimal("0.00")
    employee_count: int = 0


class IEmployeeStore(ABC):
    """
    Employee data access.

    Every method may raise StorageError; absence is reported as None or an
    empty list, never as an exception.
    """

    @abstractmethod
    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        """
        Get an employee by id.

        Args:
            employee_id: Employee primary key

        Returns:
            Employee if found, None otherwise
        """
        pass

    @abstractmethod
    def search_by_name(self, term: str) -> List[Employee]:
        """
        Case-insensitive prefix search on employee name.

        Args:
            term: Name prefix ("jo" matches "John" but not "Bojo")

        Returns:
            Matching employees ordered by id
        """
        pass

    @abstractmethod
    def find_by_department_id(self, department_id: int) -> List[Employee]:
        """Get every employee in a department, ordered by id."""
        pass

    @abstractmethod
    def count_by_department_id(self, department_id: int) -> int:
        """Count employees in a department."""
        pass

    @abstractmethod
    def get_total_count(self) -> int:
        """Count all employees."""
        pass

    @abstractmethod
    def average_salary(self, department_id: Optional[int] = None) -> Decimal:
        """
        Average salary, company-wide or for one department.

        Returns:
            Average rounded to cents, Decimal("0.00") when there are no rows
        """
        pass

    @abstractmethod
    def salary_statistics(self, department_id: int) -> SalaryStatistics:
        """Min/max/average salary and head count for a department."""
        pass

    @abstractmethod
    def count_by_hire_year(self, department_id: int) -> Dict[int, int]:
        """Head count per hire year for a department, ordered by year."""
        pass


class IDepartmentStore(ABC):
    """Department data access."""

    @abstractmethod
    def find_by_id(self, department_id: int) -> Optional[Department]:
        """
        Get a department by id.

        Args:
            department_id: Department primary key

        Returns:
            Department if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Department]:
        """Get every department, ordered by id."""
        pass
