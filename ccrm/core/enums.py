"""
Enumerations and constants for the records manager.
"""

from enum import Enum

from .exceptions import ValidationError


class EntityStatus(Enum):
    """Status of an entity in the system."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class PersonType(Enum):
    """Role tag carried by every person record."""
    STUDENT = "student"
    INSTRUCTOR = "instructor"


class Semester(Enum):
    """Academic terms a course can be offered in."""
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"

    @classmethod
    def parse(cls, raw: str) -> "Semester":
        """Parse a semester name case-insensitively."""
        name = (raw or "").strip().upper()
        if name not in cls.__members__:
            raise ValidationError(
                f"Unknown semester '{raw}'",
                error_code="INVALID_SEMESTER",
                details={"value": raw, "allowed": list(cls.__members__)},
            )
        return cls[name]


class Grade(Enum):
    """Letter grades with their lower mark bound and grade points."""
    S = ("S", 90, 4.0)
    A = ("A", 80, 4.0)
    B = ("B", 70, 3.0)
    C = ("C", 60, 2.0)
    D = ("D", 50, 1.0)
    F = ("F", 0, 0.0)

    def __init__(self, letter: str, min_marks: int, points: float):
        self.letter = letter
        self.min_marks = min_marks
        self.points = points

    @classmethod
    def from_marks(cls, marks: int) -> "Grade":
        """Classify marks (0-100) into a letter grade."""
        if not 0 <= marks <= 100:
            raise ValidationError(
                f"Marks must be between 0 and 100, got {marks}",
                error_code="INVALID_MARKS",
                details={"marks": marks},
            )
        # Members are declared highest threshold first.
        for grade in cls:
            if marks >= grade.min_marks:
                return grade
        return cls.F

