"""DepartmentRepository - SQL-backed department store"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from ..exceptions import StorageError
from ..interfaces.database import IConnectionManager
from ..interfaces.repository import IDepartmentStore
from ..models.converters import orm_list_to_departments, orm_to_department
from ..models.employee import Department
from ..models.orm import DepartmentORM

logger = logging.getLogger(__name__)


class DepartmentRepository(IDepartmentStore):
    """Department data access over SQLAlchemy sessions."""

    def __init__(self, connection_manager: IConnectionManager):
        self.connections = connection_manager

    def find_by_id(self, department_id: int) -> Optional[Department]:
        try:
            with self.connections.session_scope() as session:
                row = session.get(DepartmentORM, department_id)
                return orm_to_department(row) if row is not None else None
        except SQLAlchemyError as e:
            logger.error(f"Department query 'find_by_id' failed: {e}")
            raise StorageError("Department query failed: find_by_id", operation="find_by_id") from e

    def find_all(self) -> List[Department]:
        try:
            with self.connections.session_scope() as session:
                rows = session.query(DepartmentORM).order_by(DepartmentORM.id).all()
                return orm_list_to_departments(rows)
        except SQLAlchemyError as e:
            logger.error(f"Department query 'find_all' failed: {e}")
            raise StorageError("Department query failed: find_all", operation="find_all") from e
