"""
Report composition over the employee and department stores.

Reports read single records through the caching repositories; the
aggregates behind them always come from storage.
"""
import logging
from decimal import Decimal
from typing import Dict, Optional

from pydantic import BaseModel

from ..interfaces.repository import IDepartmentStore, IEmployeeStore, SalaryStatistics
from ..models.employee import Department, Employee

logger = logging.getLogger(__name__)


class EmployeeProfileReport(BaseModel):
    """An employee with their department and the department's average salary"""
    employee: Employee
    department: Optional[Department] = None
    department_average_salary: Optional[Decimal] = None


class DepartmentAnalyticsReport(BaseModel):
    """Salary statistics and hire-year breakdown for one department"""
    department: Department
    salary_statistics: SalaryStatistics
    employees_by_hire_year: Dict[int, int]


class CompanyOverviewReport(BaseModel):
    """Company-wide head counts and average salary"""
    total_employees: int
    total_departments: int
    average_salary: Decimal


class ReportService:
    """Builds the employee-profile, department-analytics and company-overview reports"""

    def __init__(self, employees: IEmployeeStore, departments: IDepartmentStore):
        self.employees = employees
        self.departments = departments

    def employee_profile(self, employee_id: int) -> Optional[EmployeeProfileReport]:
        """
        Build an employee profile.

        A department_id that points at no department yields a profile with
        department set to None.

        Args:
            employee_id: Employee primary key

        Returns:
            EmployeeProfileReport, or None if the employee does not exist
        """
        employee = self.employees.find_by_id(employee_id)
        if employee is None:
            return None

        department = None
        average = None
        if employee.department_id is not None:
            department = self.departments.find_by_id(employee.department_id)
            if department is None:
                logger.warning(
                    f"Employee {employee_id} references missing department {employee.department_id}"
                )
            average = self.employees.average_salary(employee.department_id)

        return EmployeeProfileReport(
            employee=employee,
            department=department,
            department_average_salary=average,
        )

    def department_analytics(self, department_id: int) -> Optional[DepartmentAnalyticsReport]:
        """
        Build department analytics.

        Returns:
            DepartmentAnalyticsReport, or None if the department does not exist
        """
        department = self.departments.find_by_id(department_id)
        if department is None:
            return None

        return DepartmentAnalyticsReport(
            department=department,
            salary_statistics=self.employees.salary_statistics(department_id),
            employees_by_hire_year=self.employees.count_by_hire_year(department_id),
        )

    def company_overview(self) -> CompanyOverviewReport:
        return CompanyOverviewReport(
            total_employees=self.employees.get_total_count(),
            total_departments=len(self.departments.find_all()),
            average_salary=self.employees.average_salary(),
        )
