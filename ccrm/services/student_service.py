"""
In-memory student store keyed by registration number.
"""

import logging
from typing import Dict, List, Optional

from ..core.entities import Student
from ..core.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)


class StudentService:
    """Service for adding, looking up and deactivating students."""

    def __init__(self):
        # dicts keep insertion order, which is the listing order
        self._students: Dict[str, Student] = {}

    def add_student(self, student: Student) -> bool:
        """Add a student. Returns False (with a warning) if the registration number is taken."""
        reg_no = student.registration_number
        if reg_no in self._students:
            logger.warning("Student with registration number '%s' already exists, skipping", reg_no)
            return False
        self._students[reg_no] = student
        logger.info("Student '%s' (Reg. No: %s) added", student.name, reg_no)
        return True

    def get_student(self, registration_number: str) -> Optional[Student]:
        """Get a student by registration number, or None."""
        return self._students.get(registration_number)

    def require_student(self, registration_number: str) -> Student:
        """Get a student by registration number or raise ResourceNotFoundError."""
        student = self._students.get(registration_number)
        if student is None:
            raise ResourceNotFoundError(
                f"Student not found with registration number: {registration_number}",
                error_code="STUDENT_NOT_FOUND",
                details={"registration_number": registration_number},
            )
        return student

    def list_students(self) -> List[Student]:
        """Get all students in insertion order."""
        return list(self._students.values())

    def deactivate_student(self, registration_number: str) -> bool:
        """Soft-deactivate a student; warns and returns False when absent."""
        student = self._students.get(registration_number)
        if student is None:
            logger.warning("Couldn't find student '%s' to deactivate", registration_number)
            return False
        student.deactivate()
        logger.info("Student '%s' deactivated", registration_number)
        return True

    def activate_student(self, registration_number: str) -> bool:
        """Re-activate a student; warns and returns False when absent."""
        student = self._students.get(registration_number)
        if student is None:
            logger.warning("Couldn't find student '%s' to activate", registration_number)
            return False
        student.activate()
        logger.info("Student '%s' activated", registration_number)
        return True

    def count(self) -> int:
        return len(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, registration_number: str) -> bool:
        return registration_number in self._students
