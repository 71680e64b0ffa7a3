from .employee import Employee, Department
from .orm import EmployeeORM, DepartmentORM, Base
from .converters import orm_to_employee, orm_to_department, orm_list_to_employees, orm_list_to_departments

__all__ = [
    "Employee",
    "Department",
    "EmployeeORM",
    "DepartmentORM",
    "Base",
    "orm_to_employee",
    "orm_to_department",
    "orm_list_to_employees",
    "orm_list_to_departments",
]
