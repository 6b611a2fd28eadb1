"""
Core entities for the records manager.

People are flat records tagged with a ``PersonType`` rather than a class
hierarchy. A ``Student`` composes its ``Person`` record and adds the academic
state (registration number, enrollments, transcript).
"""

import uuid
from abc import ABC
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from .enums import EntityStatus, PersonType, Semester, Grade
from .exceptions import ValidationError, EnrollmentError


class AbstractEntity(ABC):
    """Base abstract entity with universal ID, lifecycle, and versioning."""

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or str(uuid.uuid4())
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1
        self._status = EntityStatus.ACTIVE

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    @property
    def status(self) -> EntityStatus:
        """Get entity status."""
        return self._status

    @property
    def is_active(self) -> bool:
        return self._status == EntityStatus.ACTIVE

    def touch(self) -> None:
        """Record a mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def activate(self) -> None:
        """Activate the entity."""
        self._status = EntityStatus.ACTIVE
        self.touch()

    def deactivate(self) -> None:
        """Deactivate the entity."""
        self._status = EntityStatus.INACTIVE
        self.touch()

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
            'status': self._status.value,
        }

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id})"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id}, status={self._status.value})"


class Person(AbstractEntity):
    """A person known to the system, tagged with its role."""

    def __init__(self, name: str, email: str, person_type: PersonType, **kwargs):
        super().__init__(**kwargs)
        self._name = name
        self._email = email
        self._person_type = person_type

    @classmethod
    def instructor(cls, person_id: str, name: str, email: str) -> "Person":
        """Build an instructor record; courses refer to it by ``id``."""
        return cls(name, email, PersonType.INSTRUCTOR, entity_id=person_id)

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value
        self.touch()

    @property
    def email(self) -> str:
        return self._email

    @email.setter
    def email(self, value: str) -> None:
        self._email = value
        self.touch()

    @property
    def person_type(self) -> PersonType:
        return self._person_type

    @property
    def creation_date(self) -> date:
        return self._created_at.date()

    def profile(self) -> str:
        """One-line summary of the person."""
        return (f"ID: {self.id}, Name: {self._name}, Email: {self._email}, "
                f"Role: {self._person_type.value}, Active: {self.is_active}, "
                f"Since: {self.creation_date.isoformat()}")

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'name': self._name,
            'email': self._email,
            'person_type': self._person_type.value,
        })
        return base_dict


@dataclass(frozen=True)
class TranscriptEntry:
    """Immutable record of one course's marks and derived grade."""
    course_code: str
    marks: int
    grade: Grade

    def __str__(self) -> str:
        return f"{self.course_code}: {self.marks} marks, grade {self.grade.letter} ({self.grade.points:.1f})"


class Student:
    """Student variant: a STUDENT-tagged person plus academic records."""

    def __init__(self, person_id: str, registration_number: str, full_name: str, email: str):
        self._person = Person(full_name, email, PersonType.STUDENT, entity_id=person_id)
        self._registration_number = registration_number
        self._enrolled_courses: List[str] = []
        self._transcript: Dict[str, TranscriptEntry] = {}

    @property
    def person(self) -> Person:
        return self._person

    @property
    def id(self) -> str:
        return self._person.id

    @property
    def registration_number(self) -> str:
        return self._registration_number

    @property
    def name(self) -> str:
        return self._person.name

    @name.setter
    def name(self, value: str) -> None:
        self._person.name = value

    @property
    def email(self) -> str:
        return self._person.email

    @email.setter
    def email(self, value: str) -> None:
        self._person.email = value

    @property
    def is_active(self) -> bool:
        return self._person.is_active

    @property
    def enrolled_courses(self) -> List[str]:
        """Enrolled course codes in enrollment order (copy)."""
        return list(self._enrolled_courses)

    @property
    def transcript(self) -> Dict[str, TranscriptEntry]:
        """Transcript entries keyed by course code (copy)."""
        return dict(self._transcript)

    def is_enrolled(self, course_code: str) -> bool:
        return course_code in self._enrolled_courses

    def activate(self) -> None:
        self._person.activate()

    def deactivate(self) -> None:
        self._person.deactivate()

    def enroll(self, course_code: str) -> bool:
        """Add a course code; returns False when already enrolled."""
        if course_code in self._enrolled_courses:
            return False
        self._enrolled_courses.append(course_code)
        self._person.touch()
        return True

    def unenroll(self, course_code: str) -> bool:
        """Remove a course code; returns False when it was not enrolled."""
        if course_code not in self._enrolled_courses:
            return False
        self._enrolled_courses.remove(course_code)
        self._person.touch()
        return True

    def record_transcript_entry(self, entry: TranscriptEntry) -> None:
        """Store an entry, replacing any previous one for the same course."""
        if entry.course_code not in self._enrolled_courses:
            raise EnrollmentError(
                f"Student {self._registration_number} is not enrolled in {entry.course_code}",
                error_code="NOT_ENROLLED",
            )
        self._transcript[entry.course_code] = entry
        self._person.touch()

    def profile(self) -> str:
        return (f"Student [{self._person.profile()}, RegistrationNumber: {self._registration_number}, "
                f"Enrolled Courses: {self._enrolled_courses}]")

    def to_dict(self) -> Dict[str, Any]:
        base_dict = self._person.to_dict()
        base_dict.update({
            'registration_number': self._registration_number,
            'enrolled_courses': list(self._enrolled_courses),
            'transcript': {
                code: {'marks': entry.marks, 'grade': entry.grade.letter}
                for code, entry in self._transcript.items()
            },
        })
        return base_dict

    def __repr__(self) -> str:
        return f"Student(registration_number={self._registration_number}, id={self.id})"


class Course(AbstractEntity):
    """Course entity representing an academic course."""

    def __init__(self, course_code: str, title: str, credits: int,
                 instructor_id: Optional[str], semester: Semester, department: str, **kwargs):
        super().__init__(**kwargs)
        self._course_code = course_code
        self._title = title
        self._credits = self._validate_credits(credits)
        self._instructor_id = instructor_id or None
        self._semester = semester
        self._department = department

    @staticmethod
    def _validate_credits(credits: int) -> int:
        if isinstance(credits, bool) or not isinstance(credits, int) or credits <= 0:
            raise ValidationError(
                f"Credits must be a positive integer, got {credits!r}",
                error_code="INVALID_CREDITS",
            )
        return credits

    @property
    def course_code(self) -> str:
        return self._course_code

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str) -> None:
        self._title = value
        self.touch()

    @property
    def credits(self) -> int:
        return self._credits

    @credits.setter
    def credits(self, value: int) -> None:
        self._credits = self._validate_credits(value)
        self.touch()

    @property
    def instructor_id(self) -> Optional[str]:
        return self._instructor_id

    @instructor_id.setter
    def instructor_id(self, value: Optional[str]) -> None:
        self._instructor_id = value or None
        self.touch()

    @property
    def semester(self) -> Semester:
        return self._semester

    @semester.setter
    def semester(self, value: Semester) -> None:
        self._semester = value
        self.touch()

    @property
    def department(self) -> str:
        return self._department

    @department.setter
    def department(self, value: str) -> None:
        self._department = value
        self.touch()

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'course_code': self._course_code,
            'title': self._title,
            'credits': self._credits,
            'instructor_id': self._instructor_id,
            'semester': self._semester.name,
            'department': self._department,
        })
        return base_dict

    def __str__(self) -> str:
        return (f"Course [{self._course_code}: {self._title}, Credits: {self._credits}, "
                f"Instructor: {self._instructor_id or '-'}, Semester: {self._semester.name}, "
                f"Dept: {self._department}]")
