"""
Enrollment service with pluggable eligibility policies.
"""

import logging
from typing import List, Optional, Tuple

from ..core.entities import Student, Course
from ..core.interfaces import EnrollmentPolicy
from .course_service import CourseService

logger = logging.getLogger(__name__)


class ActiveStudentPolicy(EnrollmentPolicy):
    """Policy that only lets active students enroll."""

    def can_enroll(self, student: Student, course: Course) -> bool:
        return student.is_active

    def get_policy_name(self) -> str:
        return "ActiveStudentPolicy"


class CreditLimitPolicy(EnrollmentPolicy):
    """Policy that caps the total credits a student can carry."""

    def __init__(self, course_service: CourseService, max_credits: int = 24):
        self._course_service = course_service
        self._max_credits = max_credits

    @property
    def max_credits(self) -> int:
        return self._max_credits

    def current_credits(self, student: Student) -> int:
        """Sum credits of the student's enrolled courses known to the store."""
        total = 0
        for code in student.enrolled_courses:
            course = self._course_service.get_course(code)
            if course is not None:
                total += course.credits
        return total

    def can_enroll(self, student: Student, course: Course) -> bool:
        return self.current_credits(student) + course.credits <= self._max_credits

    def get_policy_name(self) -> str:
        return "CreditLimitPolicy"


class EnrollmentService:
    """Service for enrolling students in courses.

    With no policies installed every enrollment is allowed unless the student
    is already enrolled in the course.
    """

    def __init__(self, policies: Optional[List[EnrollmentPolicy]] = None):
        self._policies: List[EnrollmentPolicy] = list(policies or [])

    @property
    def policies(self) -> List[EnrollmentPolicy]:
        return list(self._policies)

    def add_policy(self, policy: EnrollmentPolicy) -> None:
        """Add an enrollment policy."""
        self._policies.append(policy)

    def remove_policy(self, policy_name: str) -> None:
        """Remove an enrollment policy by name."""
        self._policies = [p for p in self._policies if p.get_policy_name() != policy_name]

    def enroll(self, student: Student, course: Course) -> bool:
        """Enroll a student. Returns True only if a new enrollment was created."""
        if student.is_enrolled(course.course_code):
            logger.warning("Student %s already enrolled in %s",
                           student.registration_number, course.course_code)
            return False

        allowed, policy_message = self._evaluate_policies(student, course)
        if not allowed:
            logger.warning("Enrollment of %s in %s rejected: %s",
                           student.registration_number, course.course_code, policy_message)
            return False

        student.enroll(course.course_code)
        logger.info("Student %s enrolled in %s", student.registration_number, course.course_code)
        return True

    def unenroll(self, student: Student, course_code: str) -> bool:
        """Drop a course. Returns False if the student was not enrolled."""
        if not student.unenroll(course_code):
            logger.warning("Student %s is not enrolled in %s", student.registration_number, course_code)
            return False
        logger.info("Student %s unenrolled from %s", student.registration_number, course_code)
        return True

    def _evaluate_policies(self, student: Student, course: Course) -> Tuple[bool, str]:
        """Evaluate all enrollment policies."""
        for policy in self._policies:
            if not policy.can_enroll(student, course):
                return False, f"Policy violation: {policy.get_policy_name()}"
        return True, "All policies satisfied"
