"""SQLAlchemy ORM models for the employee database"""
from sqlalchemy import Column, Date, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import declarative_base, validates

Base = declarative_base()


class DepartmentORM(Base):
    """SQLAlchemy ORM model for the departments table"""
    __tablename__ = 'departments'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    location = Column(String(100), nullable=True)

    # Loose reference to employees.id, intentionally not a foreign key
    manager_id = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<DepartmentORM(id={self.id}, name='{self.name}')>"

    def to_dict(self) -> dict:
        """Convert ORM model to dictionary for Pydantic conversion"""
        return {
            'id': self.id,
            'name': self.name,
            'location': self.location,
            'manager_id': self.manager_id,
        }


class EmployeeORM(Base):
    """SQLAlchemy ORM model for the employees table"""
    __tablename__ = 'employees'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    # Lowercased in Python so prefix search folds non-ASCII names on every backend
    name_lower = Column(String(200), nullable=False)
    email = Column(String(200), nullable=False, unique=True)
    department_id = Column(Integer, ForeignKey('departments.id'), nullable=True)
    salary = Column(Numeric(10, 2), nullable=True)
    hire_date = Column(Date, nullable=True)
    phone = Column(String(50), nullable=True)
    address = Column(String(500), nullable=True)

    __table_args__ = (
        Index('idx_employee_name_lower', name_lower),
        Index('idx_employee_department_id', department_id),
    )

    @validates('name')
    def _sync_name_lower(self, key, value):
        self.name_lower = value.lower() if value is not None else None
        return value

    def __repr__(self):
        return f"<EmployeeORM(id={self.id}, name='{self.name}', department_id={self.department_id})>"

    def to_dict(self) -> dict:
        """Convert ORM model to dictionary for Pydantic conversion"""
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'department_id': self.department_id,
            'salary': self.salary,
            'hire_date': self.hire_date,
            'phone': self.phone,
            'address': self.address,
        }
