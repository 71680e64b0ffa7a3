"""SQLAlchemy-based database service for the employee store"""
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

from sqlalchemy import create_engine, func, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..exceptions import StorageError
from ..interfaces.database import IConnectionManager
from ..models.converters import department_to_orm, employee_to_orm
from ..models.employee import Department, Employee
from ..models.orm import Base, DepartmentORM, EmployeeORM

logger = logging.getLogger(__name__)


class DatabaseService(IConnectionManager):
    """
    Owns the SQLAlchemy engine and session factory.

    Each storage call opens its own short-lived Session through
    session_scope(), so concurrent requests only share the connection pool.
    """

    def __init__(
        self,
        database_url: str = "sqlite:///./data/employees.db",
        pool_size: int = 20,
        pool_timeout: int = 30,
        pool_recycle: int = 1800,
        echo: bool = False
    ):
        # Public: Database URL
        self.database_url = database_url

        self.__pool_size = pool_size
        self.__pool_timeout = pool_timeout
        self.__pool_recycle = pool_recycle
        self.__echo = echo

        # Private: SQLAlchemy engine and session factory
        self.__engine: Optional[Engine] = None
        self.__SessionLocal: Optional[sessionmaker] = None

    @classmethod
    def from_settings(cls, settings) -> "DatabaseService":
        """Build a service from application Settings."""
        return cls(
            database_url=settings.database_url,
            pool_size=settings.db_pool_size,
            pool_timeout=settings.db_pool_timeout_seconds,
            pool_recycle=settings.db_pool_recycle_seconds,
            echo=settings.sql_echo,
        )

    @property
    def engine(self) -> Engine:
        if not self.__engine:
            raise StorageError("Database not connected", operation="engine")
        return self.__engine

    def connect(self) -> None:
        """Create the pooled engine and session factory"""
        if self.__engine:
            return

        url = make_url(self.database_url)
        engine_kwargs = {"echo": self.__echo, "pool_pre_ping": True}

        if url.get_backend_name() == "sqlite":
            # Allow multi-threaded access
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if url.database in (None, "", ":memory:"):
                # One shared connection so every session sees the same in-memory DB
                engine_kwargs["poolclass"] = StaticPool
            else:
                Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        else:
            engine_kwargs.update(
                pool_size=self.__pool_size,
                pool_timeout=self.__pool_timeout,
                pool_recycle=self.__pool_recycle,
            )

        try:
            self.__engine = create_engine(self.database_url, **engine_kwargs)
        except SQLAlchemyError as e:
            logger.error(f"Failed to create engine for {url.render_as_string(hide_password=True)}: {e}")
            raise StorageError("Could not connect to database", operation="connect") from e

        self.__SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
            bind=self.__engine
        )
        logger.info(f"Connected to database: {url.render_as_string(hide_password=True)}")

    def disconnect(self) -> None:
        """Dispose of the engine and its pooled connections"""
        if self.__engine:
            self.__engine.dispose()
            self.__engine = None
            self.__SessionLocal = None
            logger.info("Disconnected from database")

    def is_connected(self) -> bool:
        return self.__engine is not None

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around a series of operations.

        Commits on success, rolls back on any exception and always closes
        the session.

        Raises:
            StorageError: If connect() has not been called or disconnect() already ran
        """
        if not self.__SessionLocal:
            raise StorageError("Database not connected", operation="session_scope")

        session = self.__SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def initialize_schema(self) -> None:
        """Create tables and indexes if they don't exist"""
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Error initializing schema: {e}")
            raise StorageError("Could not initialize schema", operation="initialize_schema") from e
        logger.info("Database schema initialized")

    def ping(self) -> bool:
        """Run a trivial query; used by the health endpoint."""
        if not self.is_connected():
            return False
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    def employee_count(self) -> int:
        """Get total number of employees in database"""
        try:
            with self.session_scope() as session:
                return session.query(func.count(EmployeeORM.id)).scalar() or 0
        except SQLAlchemyError as e:
            logger.error(f"Error counting employees: {e}")
            raise StorageError("Could not count employees", operation="employee_count") from e

    def seed(self, departments: List[Department], employees: List[Employee]) -> None:
        """
        Insert departments and employees in one transaction.

        Bulk data loading is not a feature of this service; this is for
        bootstrapping a demo database and for tests.

        Args:
            departments: Departments to insert
            employees: Employees to insert
        """
        try:
            with self.session_scope() as session:
                session.add_all([department_to_orm(d) for d in departments])
                session.flush()
                session.add_all([employee_to_orm(e) for e in employees])
        except SQLAlchemyError as e:
            logger.error(f"Error seeding database: {e}")
            raise StorageError("Could not seed database", operation="seed") from e

        logger.info(f"Seeded {len(departments)} departments and {len(employees)} employees")
