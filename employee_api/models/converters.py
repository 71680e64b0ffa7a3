"""Utilities to convert between SQLAlchemy ORM and Pydantic models"""
from typing import List

from employee_api.models.employee import Department, Employee
from employee_api.models.orm import DepartmentORM, EmployeeORM


def orm_to_employee(employee_orm: EmployeeORM) -> Employee:
    """
    Convert SQLAlchemy ORM EmployeeORM to Pydantic Employee

    Args:
        employee_orm: SQLAlchemy ORM model instance

    Returns:
        Pydantic Employee instance (detached from the session)
    """
    return Employee(**employee_orm.to_dict())


def orm_list_to_employees(employees_orm: List[EmployeeORM]) -> List[Employee]:
    """Convert a list of EmployeeORM rows to Pydantic Employees"""
    return [orm_to_employee(row) for row in employees_orm]


def orm_to_department(department_orm: DepartmentORM) -> Department:
    """Convert SQLAlchemy ORM DepartmentORM to Pydantic Department"""
    return Department(**department_orm.to_dict())


def orm_list_to_departments(departments_orm: List[DepartmentORM]) -> List[Department]:
    """Convert a list of DepartmentORM rows to Pydantic Departments"""
    return [orm_to_department(row) for row in departments_orm]


def employee_to_orm(employee: Employee) -> EmployeeORM:
    """
    Convert Pydantic Employee to SQLAlchemy ORM EmployeeORM

    Used by the schema bootstrap and tests to seed rows.
    """
    return EmployeeORM(**employee.model_dump())


def department_to_orm(department: Department) -> DepartmentORM:
    """Convert Pydantic Department to SQLAlchemy ORM DepartmentORM"""
    return DepartmentORM(**department.model_dump())
