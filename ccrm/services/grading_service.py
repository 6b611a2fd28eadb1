"""
Grading: marks to letter grades, and GPA over a student's transcript.
"""

import logging

from ..core.entities import Student, TranscriptEntry
from ..core.enums import Grade
from ..core.exceptions import ValidationError, EnrollmentError
from .course_service import CourseService

logger = logging.getLogger(__name__)


class GradingService:
    """Service for recording marks and computing grade point averages."""

    def assign_marks(self, student: Student, course_code: str, marks: int) -> TranscriptEntry:
        """Record marks for an enrolled course, replacing any earlier entry."""
        if isinstance(marks, bool) or not isinstance(marks, int):
            raise ValidationError(f"Marks must be an integer, got {marks!r}", error_code="INVALID_MARKS")
        grade = Grade.from_marks(marks)

        if not student.is_enrolled(course_code):
            raise EnrollmentError(
                f"Student {student.registration_number} is not enrolled in {course_code}",
                error_code="NOT_ENROLLED",
                details={"registration_number": student.registration_number, "course_code": course_code},
            )

        entry = TranscriptEntry(course_code=course_code, marks=marks, grade=grade)
        student.record_transcript_entry(entry)
        logger.info("Recorded %d marks (%s) for %s in %s",
                    marks, grade.letter, student.registration_number, course_code)
        return entry

    def compute_gpa(self, student: Student) -> float:
        """Unweighted mean of grade points; 0.0 for an empty transcript."""
        entries = student.transcript.values()
        if not entries:
            return 0.0
        return sum(entry.grade.points for entry in entries) / len(entries)

    def compute_weighted_gpa(self, student: Student, course_service: CourseService) -> float:
        """Credit-weighted GPA. Entries whose course is not in the store are skipped."""
        total_points = 0.0
        total_credits = 0
        for code, entry in student.transcript.items():
            course = course_service.get_course(code)
            if course is None:
                logger.debug("Skipping %s in weighted GPA: course not in store", code)
                continue
            total_points += entry.grade.points * course.credits
            total_credits += course.credits
        if total_credits == 0:
            return 0.0
        return total_points / total_credits
