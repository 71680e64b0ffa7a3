"""
Exception hierarchy for the employee API.

Storage failures are surfaced as StorageError so the transport layer can map
them to a 5xx response. Not-found is never an exception: lookups return None.
"""

from typing import Any, Dict, Optional


class EmployeeApiError(Exception):
    """Base exception for the employee API."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to an error payload."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class StorageError(EmployeeApiError):
    """Connectivity or query failure raised by a storage accessor."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 details: Optional[Dict[str, Any]] = None):
        self.operation = operation
        details = dict(details or {})
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class ConfigurationError(EmployeeApiError):
    """Invalid application settings."""
