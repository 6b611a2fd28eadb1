import pytest

from ccrm.config import AppConfig
from ccrm.core.entities import Student, Course
from ccrm.core.enums import Semester
from ccrm.main import CampusRecordsManager
from ccrm.services import StudentService, CourseService, EnrollmentService, GradingService


@pytest.fixture
def student():
    return Student("P001", "2024001", "Alice Johnson", "alice@campus.edu")


@pytest.fixture
def course():
    return Course("CS101", "Intro to CS", 4, "I001", Semester.FALL, "Computer Science")


@pytest.fixture
def student_service():
    return StudentService()


@pytest.fixture
def course_service():
    return CourseService()


@pytest.fixture
def enrollment_service():
    return EnrollmentService()


@pytest.fixture
def grading_service():
    return GradingService()


@pytest.fixture
def config(tmp_path):
    return AppConfig(data_dir=tmp_path / "data", backup_dir=tmp_path / "backups")


@pytest.fixture
def manager(config):
    return CampusRecordsManager(config)
