"""
Database interfaces - separates connection management from query execution.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from sqlalchemy.orm import Session


class IConnectionManager(ABC):
    """
    Interface for database connection management.

    Storage accessors only ever ask for a session; pooling, engine lifecycle
    and schema bootstrap stay behind this interface.
    """

    @abstractmethod
    def connect(self) -> None:
        """Establish database connection."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close database connection."""
        pass

    @abstractmethod
    def is_connected(self) -> bool:
        """
        Check if database is connected.

        Returns:
            True if connected, False otherwise
        """
        pass

    @abstractmethod
    def session_scope(self) -> AbstractContextManager[Session]:
        """
        Acquire a usable database session for the duration of a with-block.

        May block while waiting on the connection pool.

        Returns:
            Context manager yielding a SQLAlchemy Session
        """
        pass
