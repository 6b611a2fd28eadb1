"""
Services module containing the in-memory stores and academic operations.
"""

from .student_service import StudentService
from .course_service import CourseService
from .enrollment_service import EnrollmentService, ActiveStudentPolicy, CreditLimitPolicy
from .grading_service import GradingService

__all__ = [
    "StudentService",
    "CourseService",
    "EnrollmentService",
    "ActiveStudentPolicy",
    "CreditLimitPolicy",
    "GradingService",
]
