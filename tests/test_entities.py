import pytest

from ccrm.core.entities import Person, Student, Course, TranscriptEntry
from ccrm.core.enums import Grade, Semester, PersonType, EntityStatus
from ccrm.core.exceptions import ValidationError, EnrollmentError


@pytest.mark.parametrize("marks,expected", [
    (100, Grade.S),
    (90, Grade.S),
    (89, Grade.A),
    (85, Grade.A),
    (80, Grade.A),
    (79, Grade.B),
    (70, Grade.B),
    (69, Grade.C),
    (60, Grade.C),
    (59, Grade.D),
    (50, Grade.D),
    (49, Grade.F),
    (0, Grade.F),
])
def test_grade_breakpoints(marks, expected):
    assert Grade.from_marks(marks) is expected


def test_grade_a_is_worth_four_points():
    assert Grade.from_marks(85).letter == "A"
    assert Grade.from_marks(85).points == 4.0


@pytest.mark.parametrize("marks", [-1, 101])
def test_grade_rejects_out_of_range_marks(marks):
    with pytest.raises(ValidationError) as exc_info:
        Grade.from_marks(marks)
    assert exc_info.value.error_code == "INVALID_MARKS"


@pytest.mark.parametrize("raw", ["fall", "FALL", " Fall ", "fAlL"])
def test_semester_parse_is_case_insensitive(raw):
    assert Semester.parse(raw) is Semester.FALL


def test_semester_parse_rejects_unknown_value():
    with pytest.raises(ValidationError):
        Semester.parse("WINTER")


def test_student_is_tagged_person(student):
    assert student.person.person_type is PersonType.STUDENT
    assert student.id == "P001"
    assert student.registration_number == "2024001"
    assert student.is_active


def test_instructor_factory():
    instructor = Person.instructor("I001", "Grace Hopper", "grace@campus.edu")
    assert instructor.person_type is PersonType.INSTRUCTOR
    assert instructor.id == "I001"
    assert "instructor" in instructor.profile()


def test_student_enroll_ignores_duplicates(student):
    assert student.enroll("CS101") is True
    assert student.enroll("CS101") is False
    assert student.enrolled_courses == ["CS101"]


def test_student_unenroll(student):
    student.enroll("CS101")
    student.enroll("MA101")
    assert student.unenroll("CS101") is True
    assert student.unenroll("CS101") is False
    assert student.enrolled_courses == ["MA101"]


def test_enrolled_courses_is_a_copy(student):
    student.enroll("CS101")
    student.enrolled_courses.append("HACK")
    assert student.enrolled_courses == ["CS101"]


def test_transcript_entry_requires_enrollment(student):
    with pytest.raises(EnrollmentError):
        student.record_transcript_entry(TranscriptEntry("CS101", 85, Grade.A))
    assert student.transcript == {}


def test_transcript_entry_overwrites(student):
    student.enroll("CS101")
    student.record_transcript_entry(TranscriptEntry("CS101", 55, Grade.D))
    student.record_transcript_entry(TranscriptEntry("CS101", 95, Grade.S))
    assert len(student.transcript) == 1
    assert student.transcript["CS101"].marks == 95


def test_deactivate_is_soft(student):
    version = student.person.version
    student.deactivate()
    assert not student.is_active
    assert student.person.status is EntityStatus.INACTIVE
    assert student.person.version == version + 1


def test_student_setters_update_person(student):
    student.name = "Alice J."
    student.email = "aj@campus.edu"
    assert student.person.name == "Alice J."
    assert student.to_dict()["email"] == "aj@campus.edu"


def test_course_fields(course):
    assert course.credits == 4
    assert course.semester is Semester.FALL
    assert "CS101" in str(course)


def test_course_to_dict(course):
    data = course.to_dict()
    assert data["course_code"] == "CS101"
    assert data["credits"] == 4
    assert data["instructor_id"] == "I001"
    assert data["semester"] == "FALL"
    assert data["department"] == "Computer Science"
    assert data["status"] == "active"
    assert data["version"] == course.version


def test_course_empty_instructor_is_none():
    course = Course("MA101", "Calculus", 3, "", Semester.SPRING, "Math")
    assert course.instructor_id is None


@pytest.mark.parametrize("credits", [0, -3, "4", True])
def test_course_rejects_bad_credits(credits):
    with pytest.raises(ValidationError):
        Course("MA101", "Calculus", credits, None, Semester.SPRING, "Math")


def test_course_credits_setter_validates(course):
    with pytest.raises(ValidationError):
        course.credits = 0
    course.credits = 5
    assert course.credits == 5
