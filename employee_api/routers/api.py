from fastapi import APIRouter, Depends, HTTPException, Query, Request
from typing import List

from ..interfaces.repository import IDepartmentStore, IEmployeeStore
from ..models.employee import Department, Employee
from ..services.report_service import (
    CompanyOverviewReport,
    DepartmentAnalyticsReport,
    EmployeeProfileReport,
    ReportService,
)
from ..services.statistics_service import CacheStatisticsReport, CacheStatisticsReporter


router = APIRouter(prefix="/api", tags=["employee-api"])


# Dependencies resolve the services main.py stores on app.state
def get_employee_store(request: Request) -> IEmployeeStore:
    return request.app.state.employee_store


def get_department_store(request: Request) -> IDepartmentStore:
    return request.app.state.department_store


def get_report_service(request: Request) -> ReportService:
    return request.app.state.report_service


def get_statistics_reporter(request: Request) -> CacheStatisticsReporter:
    return request.app.state.statistics_reporter


# Literal paths are registered before /employees/{employee_id}
@router.get("/employees/search", response_model=List[Employee])
def search_employees(
    name: str = Query(default=""),
    employees: IEmployeeStore = Depends(get_employee_store)
) -> List[Employee]:
    """
    Case-insensitive prefix search on employee name

    Args:
        name: Name prefix, must not be blank

    Returns:
        Matching employees ordered by id
    """
    if not name.strip():
        raise HTTPException(status_code=400, detail="Query parameter 'name' is required")
    return employees.search_by_name(name.strip())


@router.get("/employees/count")
def count_employees(employees: IEmployeeStore = Depends(get_employee_store)) -> dict:
    return {"count": employees.get_total_count()}


@router.get("/employees/{employee_id}", response_model=Employee)
def get_employee(
    employee_id: int,
    employees: IEmployeeStore = Depends(get_employee_store)
) -> Employee:
    employee = employees.find_by_id(employee_id)
    if employee is None:
        raise HTTPException(status_code=404, detail=f"Employee {employee_id} not found")
    return employee


@router.get("/departments", response_model=List[Department])
def list_departments(departments: IDepartmentStore = Depends(get_department_store)) -> List[Department]:
    return departments.find_all()


@router.get("/departments/{department_id}", response_model=Department)
def get_department(
    department_id: int,
    departments: IDepartmentStore = Depends(get_department_store)
) -> Department:
    department = departments.find_by_id(department_id)
    if department is None:
        raise HTTPException(status_code=404, detail=f"Department {department_id} not found")
    return department


@router.get("/departments/{department_id}/employees", response_model=List[Employee])
def list_department_employees(
    department_id: int,
    employees: IEmployeeStore = Depends(get_employee_store)
) -> List[Employee]:
    """Employees of a department; empty list for an unknown department"""
    return employees.find_by_department_id(department_id)


@router.get("/reports/employee-profile/{employee_id}", response_model=EmployeeProfileReport)
def employee_profile(
    employee_id: int,
    reports: ReportService = Depends(get_report_service)
) -> EmployeeProfileReport:
    report = reports.employee_profile(employee_id)
    if report is None:
        raise HTTPException(status_code=404, detail=f"Employee {employee_id} not found")
    return report


@router.get("/reports/department-analytics/{department_id}", response_model=DepartmentAnalyticsReport)
def department_analytics(
    department_id: int,
    reports: ReportService = Depends(get_report_service)
) -> DepartmentAnalyticsReport:
    report = reports.department_analytics(department_id)
    if report is None:
        raise HTTPException(status_code=404, detail=f"Department {department_id} not found")
    return report


@router.get("/dashboard/company-overview", response_model=CompanyOverviewReport)
def company_overview(reports: ReportService = Depends(get_report_service)) -> CompanyOverviewReport:
    return reports.company_overview()


@router.get("/cache/stats", response_model=CacheStatisticsReport)
def cache_stats(
    reporter: CacheStatisticsReporter = Depends(get_statistics_reporter)
) -> CacheStatisticsReport:
    """
    Per-cache hit/miss/eviction counters

    Returns:
        CacheStatisticsReport with one entry per cache and totals
    """
    return reporter.report()


@router.post("/cache/clear")
def clear_caches(
    reset_counters: bool = False,
    reporter: CacheStatisticsReporter = Depends(get_statistics_reporter)
) -> dict:
    """
    Drop every cache entry

    Args:
        reset_counters: Also zero the statistics counters
    """
    reporter.reset(reset_counters=reset_counters)
    return {"status": "cleared", "reset_counters": reset_counters}
