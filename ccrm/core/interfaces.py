"""
Core interfaces and abstract base classes.
"""

from abc import ABC, abstractmethod


class EnrollmentPolicy(ABC):
    """Abstract base class for enrollment policies."""

    @abstractmethod
    def can_enroll(self, student: 'Student', course: 'Course') -> bool:
        """Check if a student can enroll in a course."""
        pass

    @abstractmethod
    def get_policy_name(self) -> str:
        """Get the name of this policy."""
        pass
