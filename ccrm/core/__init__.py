"""
Core module containing the domain object model.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Person",
    "Student",
    "Course",
    "TranscriptEntry",

    # Interfaces
    "EnrollmentPolicy",

    # Enums
    "EntityStatus",
    "PersonType",
    "Semester",
    "Grade",

    # Exceptions
    "CCRMException",
    "ValidationError",
    "ResourceNotFoundError",
    "EnrollmentError",
    "PersistenceError",
    "ConfigurationError",
]
