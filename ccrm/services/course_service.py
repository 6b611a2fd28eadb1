"""
In-memory course store keyed by course code.
"""

import logging
from typing import Dict, List, Optional

from ..core.entities import Course
from ..core.enums import Semester
from ..core.exceptions import ResourceNotFoundError

logger = logging.getLogger(__name__)


class CourseService:
    """Service for adding, looking up and filtering courses."""

    def __init__(self):
        self._courses: Dict[str, Course] = {}

    def add_course(self, course: Course) -> bool:
        """Add a course. Returns False (with a warning) if the code is taken."""
        code = course.course_code
        if code in self._courses:
            logger.warning("Course with code '%s' already exists, skipping", code)
            return False
        self._courses[code] = course
        logger.info("Course '%s' (%s) added", course.title, code)
        return True

    def get_course(self, course_code: str) -> Optional[Course]:
        return self._courses.get(course_code)

    def require_course(self, course_code: str) -> Course:
        """Get a course by code or raise ResourceNotFoundError."""
        course = self._courses.get(course_code)
        if course is None:
            raise ResourceNotFoundError(
                f"Course not found with code: {course_code}",
                error_code="COURSE_NOT_FOUND",
                details={"course_code": course_code},
            )
        return course

    def list_courses(self) -> List[Course]:
        """Get all courses in insertion order."""
        return list(self._courses.values())

    def find_courses(self, department: Optional[str] = None,
                     instructor_id: Optional[str] = None,
                     semester: Optional[Semester] = None) -> List[Course]:
        """Filter courses; criteria left as None are ignored. Department matches case-insensitively."""
        results = []
        for course in self._courses.values():
            if department is not None and course.department.lower() != department.lower():
                continue
            if instructor_id is not None and course.instructor_id != instructor_id:
                continue
            if semester is not None and course.semester != semester:
                continue
            results.append(course)
        return results

    def count(self) -> int:
        return len(self._courses)

    def __len__(self) -> int:
        return len(self._courses)

    def __contains__(self, course_code: str) -> bool:
        return course_code in self._courses
