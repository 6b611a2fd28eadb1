"""
CSV import/export for the student and course stores.

The format is deliberately minimal: comma-delimited, no header row, and no
quoting or escaping, so field values must not contain commas.

    students: personId,registrationNumber,fullName,email
    courses:  courseCode,title,credits,instructorId,semester,department

Import policy:
- Lines with fewer fields than a record needs (blank lines included) are
  skipped and do not count towards the returned total.
- Trailing empty fields do not count, so `P1,R1,Ann,` is a short line.
- Extra trailing fields are ignored.
- A file that cannot be read or is not valid UTF-8 raises PersistenceError.
- Rows are handed to the store as-is; a duplicate key is rejected by the
  store with a warning but still counts as a parsed row.
- A course row with bad credits or an unknown semester aborts the whole
  import. Rows added before it stay added.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError, field_validator

from ..core.entities import Student, Course
from ..core.enums import Semester
from ..core.exceptions import PersistenceError, ValidationError
from ..services import StudentService, CourseService

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

STUDENT_FIELDS = 4
COURSE_FIELDS = 6
DELIMITER = ","


class StudentRow(BaseModel):
    person_id: str
    registration_number: str
    full_name: str
    email: str

    def to_entity(self) -> Student:
        return Student(self.person_id, self.registration_number, self.full_name, self.email)


class CourseRow(BaseModel):
    course_code: str
    title: str
    credits: int = Field(..., ge=1)
    instructor_id: Optional[str] = None
    semester: Semester
    department: str

    @field_validator("credits", mode="before")
    @classmethod
    def strip_credits(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("instructor_id", mode="before")
    @classmethod
    def empty_instructor_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("semester", mode="before")
    @classmethod
    def parse_semester(cls, v):
        if isinstance(v, Semester):
            return v
        try:
            return Semester.parse(v)
        except ValidationError as e:
            raise ValueError(e.message)

    def to_entity(self) -> Course:
        return Course(self.course_code, self.title, self.credits,
                      self.instructor_id, self.semester, self.department)


def _read_lines(file_path: PathLike) -> List[str]:
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise PersistenceError(f"Failed to read {file_path}: {e}", error_code="IO_READ") from e


def _write_lines(file_path: PathLike, lines: List[str]) -> None:
    path = Path(file_path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        raise PersistenceError(f"Failed to write {file_path}: {e}", error_code="IO_WRITE") from e


def _split(line: str, required: int) -> Optional[List[str]]:
    fields = line.strip().split(DELIMITER)
    while fields and not fields[-1]:
        fields.pop()
    if len(fields) < required:
        return None
    return fields[:required]


class ImportExportService:
    """Moves student and course data between the stores and CSV files."""

    def import_students(self, file_path: PathLike, student_service: StudentService) -> int:
        """Import students; returns the number of rows parsed and added."""
        count = self._import(file_path, STUDENT_FIELDS, self._parse_student, student_service.add_student)
        logger.info("Imported %d student rows from %s", count, file_path)
        return count

    def import_courses(self, file_path: PathLike, course_service: CourseService) -> int:
        """Import courses; returns the number of rows parsed and added."""
        count = self._import(file_path, COURSE_FIELDS, self._parse_course, course_service.add_course)
        logger.info("Imported %d course rows from %s", count, file_path)
        return count

    def export_students(self, file_path: PathLike, student_service: StudentService) -> int:
        """Write every student in listing order, overwriting the file."""
        lines = [
            DELIMITER.join([s.id, s.registration_number, s.name, s.email])
            for s in student_service.list_students()
        ]
        _write_lines(file_path, lines)
        logger.info("Exported %d students to %s", len(lines), file_path)
        return len(lines)

    def export_courses(self, file_path: PathLike, course_service: CourseService) -> int:
        """Write every course in listing order, overwriting the file."""
        lines = [
            DELIMITER.join([
                c.course_code, c.title, str(c.credits), c.instructor_id or "",
                c.semester.name, c.department,
            ])
            for c in course_service.list_courses()
        ]
        _write_lines(file_path, lines)
        logger.info("Exported %d courses to %s", len(lines), file_path)
        return len(lines)

    def _import(self, file_path: PathLike, required: int,
                parse: Callable[[List[str], int], object], add: Callable[[object], bool]) -> int:
        imported = 0
        for line_num, line in enumerate(_read_lines(file_path), 1):
            fields = _split(line, required)
            if fields is None:
                logger.debug("Skipping short line %d in %s", line_num, file_path)
                continue
            add(parse(fields, line_num))
            imported += 1
        return imported

    @staticmethod
    def _parse_student(fields: List[str], line_num: int) -> Student:
        person_id, reg_no, full_name, email = fields
        try:
            row = StudentRow(person_id=person_id, registration_number=reg_no,
                             full_name=full_name, email=email)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid student row at line {line_num}: {e}",
                                  error_code="INVALID_ROW", details={"line": line_num}) from e
        return row.to_entity()

    @staticmethod
    def _parse_course(fields: List[str], line_num: int) -> Course:
        code, title, credits, instructor_id, semester, department = fields
        try:
            row = CourseRow(course_code=code, title=title, credits=credits,
                            instructor_id=instructor_id, semester=semester, department=department)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid course row at line {line_num}: {e}",
                                  error_code="INVALID_ROW", details={"line": line_num}) from e
        return row.to_entity()
