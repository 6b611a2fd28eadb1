"""
Custom exceptions for the records manager.
"""

from typing import Optional, Any, Dict


class CCRMException(Exception):
    """Base exception for all records manager errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(CCRMException):
    """Raised when input data (marks, semester, credits, CSV rows) is invalid."""
    pass


class ResourceNotFoundError(CCRMException):
    """Raised when a requested student or course is not found."""
    pass


class EnrollmentError(CCRMException):
    """Raised when an operation requires an enrollment that does not exist."""
    pass


class PersistenceError(CCRMException):
    """Raised when reading, writing or copying files fails."""
    pass


class ConfigurationError(CCRMException):
    """Raised when configuration is invalid."""
    pass
