"""
EmployeeRepository - SQL-backed employee store.

Runs parameterized queries through the connection manager and maps rows to
immutable Employee records. Every SQLAlchemy failure is logged and re-raised
as StorageError.
"""

import logging
from collections import Counter
from decimal import Decimal
from typing import Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import StorageError
from ..interfaces.database import IConnectionManager
from ..interfaces.repository import IEmployeeStore, SalaryStatistics
from ..models.converters import orm_list_to_employees, orm_to_employee
from ..models.employee import Employee, to_money
from ..models.orm import EmployeeORM

logger = logging.getLogger(__name__)

ZERO_MONEY = Decimal("0.00")


def _money_or_none(value) -> Optional[Decimal]:
    # SQLite hands aggregates back as float; go through str to keep the digits
    if value is None:
        return None
    return to_money(Decimal(str(value)))


class EmployeeRepository(IEmployeeStore):
    """Employee data access over SQLAlchemy sessions."""

    def __init__(self, connection_manager: IConnectionManager):
        """
        Initialize repository.

        Args:
            connection_manager: Source of short-lived sessions
        """
        self.connections = connection_manager

    def _storage_error(self, operation: str, error: SQLAlchemyError) -> StorageError:
        logger.error(f"Employee query '{operation}' failed: {error}")
        return StorageError(f"Employee query failed: {operation}", operation=operation)

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        try:
            with self.connections.session_scope() as session:
                row = session.get(EmployeeORM, employee_id)
                return orm_to_employee(row) if row is not None else None
        except SQLAlchemyError as e:
            raise self._storage_error("find_by_id", e) from e

    def search_by_name(self, term: str) -> List[Employee]:
        """
        Case-insensitive prefix search.

        Matches name_lower LIKE 'term%' so the name_lower index can serve
        it. Wildcards in the term are escaped.
        """
        prefix = term.lower()
        try:
            with self.connections.session_scope() as session:
                rows = (
                    session.query(EmployeeORM)
                    .filter(EmployeeORM.name_lower.startswith(prefix, autoescape=True))
                    .order_by(EmployeeORM.id)
                    .all()
                )
                return orm_list_to_employees(rows)
        except SQLAlchemyError as e:
            raise self._storage_error("search_by_name", e) from e

    def find_by_department_id(self, department_id: int) -> List[Employee]:
        try:
            with self.connections.session_scope() as session:
                rows = (
                    session.query(EmployeeORM)
                    .filter(EmployeeORM.department_id == department_id)
                    .order_by(EmployeeORM.id)
                    .all()
                )
                return orm_list_to_employees(rows)
        except SQLAlchemyError as e:
            raise self._storage_error("find_by_department_id", e) from e

    def count_by_department_id(self, department_id: int) -> int:
        try:
            with self.connections.session_scope() as session:
                count = (
                    session.query(func.count(EmployeeORM.id))
                    .filter(EmployeeORM.department_id == department_id)
                    .scalar()
                )
                return count or 0
        except SQLAlchemyError as e:
            raise self._storage_error("count_by_department_id", e) from e

    def get_total_count(self) -> int:
        try:
            with self.connections.session_scope() as session:
                return session.query(func.count(EmployeeORM.id)).scalar() or 0
        except SQLAlchemyError as e:
            raise self._storage_error("get_total_count", e) from e

    def average_salary(self, department_id: Optional[int] = None) -> Decimal:
        try:
            with self.connections.session_scope() as session:
                query = session.query(func.avg(EmployeeORM.salary))
                if department_id is not None:
                    query = query.filter(EmployeeORM.department_id == department_id)
                average = query.scalar()
        except SQLAlchemyError as e:
            raise self._storage_error("average_salary", e) from e

        return _money_or_none(average) or ZERO_MONEY

    def salary_statistics(self, department_id: int) -> SalaryStatistics:
        try:
            with self.connections.session_scope() as session:
                minimum, maximum, average, count = (
                    session.query(
                        func.min(EmployeeORM.salary),
                        func.max(EmployeeORM.salary),
                        func.avg(EmployeeORM.salary),
                        func.count(EmployeeORM.id),
                    )
                    .filter(EmployeeORM.department_id == department_id)
                    .one()
                )
        except SQLAlchemyError as e:
            raise self._storage_error("salary_statistics", e) from e

        return SalaryStatistics(
            min_salary=_money_or_none(minimum),
            max_salary=_money_or_none(maximum),
            average_salary=_money_or_none(average) or ZERO_MONEY,
            employee_count=count or 0,
        )

    def count_by_hire_year(self, department_id: int) -> Dict[int, int]:
        # Grouped in Python: year extraction differs between SQL dialects
        try:
            with self.connections.session_scope() as session:
                hire_dates = (
                    session.query(EmployeeORM.hire_date)
                    .filter(EmployeeORM.department_id == department_id)
                    .filter(EmployeeORM.hire_date.isnot(None))
                    .all()
                )
        except SQLAlchemyError as e:
            raise self._storage_error("count_by_hire_year", e) from e

        counts = Counter(hire_date.year for (hire_date,) in hire_dates)
        return dict(sorted(counts.items()))
