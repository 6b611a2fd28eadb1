"""
Interactive menu loop.

Every action reads its input through ``input_func`` so the loop can be driven
by a scripted sequence of answers. Errors raised by the services are reported
and the loop carries on.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Optional

from ..core.entities import Student, Course
from ..core.enums import Semester
from ..core.exceptions import CCRMException, ValidationError

logger = logging.getLogger(__name__)

MAIN_MENU = """
==== Campus Course & Records Manager ====
1. Manage Students
2. Manage Courses
3. Manage Enrollments
4. Manage Grades
5. Import/Export Data
6. Backup Data
0. Exit"""


class MenuApp:
    """Menu-driven front end over a ``CampusRecordsManager``."""

    def __init__(self, manager, input_func: Optional[Callable[[str], str]] = None):
        self._manager = manager
        self._input = input_func or input
        self._actions: Dict[int, Callable[[], None]] = {
            1: self.student_menu,
            2: self.course_menu,
            3: self.enrollment_menu,
            4: self.grading_menu,
            5: self.import_export_menu,
            6: self.backup_menu,
        }

    def run(self) -> None:
        """Loop until the user selects 0."""
        while True:
            print(MAIN_MENU)
            choice = self._read_choice("Please select an option: ")
            if choice == 0:
                break
            action = self._actions.get(choice)
            if action is None:
                print("Invalid option. Please try again.")
                continue
            try:
                action()
            except CCRMException as e:
                logger.debug("Menu action failed: %s", e.message)
                print(f"Error: {e.message}")
        print("Exiting application. Goodbye!")

    def _ask(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def _read_choice(self, prompt: str) -> int:
        raw = self._ask(prompt)
        try:
            return int(raw)
        except ValueError:
            print("That's not a valid number. Please try again with a numeric option.")
            return -1

    def _read_int(self, prompt: str, field: str) -> int:
        raw = self._ask(prompt)
        try:
            return int(raw)
        except ValueError:
            raise ValidationError(f"{field} must be an integer, got '{raw}'", error_code="INVALID_INPUT") from None

    def _submenu(self, title: str, options: Dict[int, tuple]) -> None:
        print(f"\n-- {title} --")
        for number, (label, _) in options.items():
            print(f"{number}. {label}")
        choice = self._read_choice("Select an option: ")
        if choice not in options:
            print("Invalid option.")
            return
        options[choice][1]()

    # --- Students ---

    def student_menu(self) -> None:
        self._submenu("Student Management", {
            1: ("Add a new student", self.add_student),
            2: ("List all students", self.list_students),
            3: ("Deactivate a student", self.deactivate_student),
        })

    def add_student(self) -> None:
        person_id = self._ask("Enter Student ID: ")
        reg_no = self._ask("Enter Registration Number: ")
        name = self._ask("Enter Full Name: ")
        email = self._ask("Enter Email: ")
        if self._manager.student_service.add_student(Student(person_id, reg_no, name, email)):
            print("Student added successfully!")
        else:
            print(f"A student with registration number '{reg_no}' already exists.")

    def list_students(self) -> None:
        students = self._manager.student_service.list_students()
        print("\n-- All Students --")
        if not students:
            print("No students on record.")
        for student in students:
            print(student.profile())

    def deactivate_student(self) -> None:
        reg_no = self._ask("Enter Student Registration Number: ")
        if self._manager.student_service.deactivate_student(reg_no):
            print(f"Student '{reg_no}' has been deactivated.")
        else:
            print(f"Couldn't find student with registration number '{reg_no}'.")

    # --- Courses ---

    def course_menu(self) -> None:
        self._submenu("Course Management", {
            1: ("Add a new course", self.add_course),
            2: ("List all courses", self.list_courses),
            3: ("Search courses", self.search_courses),
        })

    def add_course(self) -> None:
        code = self._ask("Enter Course Code: ")
        title = self._ask("Enter Course Title: ")
        credits = self._read_int("Enter Credits (as an integer): ", "Credits")
        instructor_id = self._ask("Enter Instructor ID (optional): ") or None
        semester = Semester.parse(self._ask("Enter Semester (SPRING, SUMMER, FALL): "))
        department = self._ask("Enter Department: ")
        course = Course(code, title, credits, instructor_id, semester, department)
        if self._manager.course_service.add_course(course):
            print("Course added successfully!")
        else:
            print(f"A course with code '{code}' already exists.")

    def list_courses(self) -> None:
        print("\n-- All Courses --")
        courses = self._manager.course_service.list_courses()
        if not courses:
            print("No courses on record.")
        for course in courses:
            print(course)

    def search_courses(self) -> None:
        department = self._ask("Department (blank for any): ") or None
        instructor_id = self._ask("Instructor ID (blank for any): ") or None
        raw_semester = self._ask("Semester (blank for any): ")
        semester = Semester.parse(raw_semester) if raw_semester else None
        matches = self._manager.course_service.find_courses(
            department=department, instructor_id=instructor_id, semester=semester
        )
        print(f"\n-- {len(matches)} matching course(s) --")
        for course in matches:
            print(course)

    # --- Enrollments ---

    def enrollment_menu(self) -> None:
        self._submenu("Enrollment Management", {
            1: ("Enroll a student in a course", self.enroll_student),
            2: ("Unenroll a student from a course", self.unenroll_student),
            3: ("View a student's enrollments", self.view_enrollments),
        })

    def enroll_student(self) -> None:
        reg_no = self._ask("Enter Student Registration Number: ")
        code = self._ask("Enter Course Code: ")
        student = self._manager.student_service.require_student(reg_no)
        course = self._manager.course_service.require_course(code)
        if self._manager.enrollment_service.enroll(student, course):
            print("Enrollment successful!")
        else:
            print("Enrollment failed. The student may already be enrolled or an enrollment rule was not met.")

    def unenroll_student(self) -> None:
        reg_no = self._ask("Enter Student Registration Number: ")
        code = self._ask("Enter Course Code: ")
        student = self._manager.student_service.require_student(reg_no)
        if self._manager.enrollment_service.unenroll(student, code):
            print("Unenrollment successful!")
        else:
            print(f"Student is not enrolled in {code}.")

    def view_enrollments(self) -> None:
        reg_no = self._ask("Enter Student Registration Number: ")
        print(self._manager.student_service.require_student(reg_no).profile())

    # --- Grades ---

    def grading_menu(self) -> None:
        self._submenu("Grading Management", {
            1: ("Assign a grade to a student", self.assign_marks),
            2: ("View a student's transcript", self.view_transcript),
        })

    def assign_marks(self) -> None:
        reg_no = self._ask("Enter Student Registration Number: ")
        code = self._ask("Enter Course Code: ")
        marks = self._read_int("Enter Marks (0-100): ", "Marks")
        student = self._manager.student_service.require_student(reg_no)
        entry = self._manager.grading_service.assign_marks(student, code, marks)
        print(f"Marks and grade assigned: {entry}")

    def view_transcript(self) -> None:
        reg_no = self._ask("Enter Student Registration Number: ")
        student = self._manager.student_service.require_student(reg_no)
        grading = self._manager.grading_service
        print(f"\n-- Transcript for {student.name} --")
        for entry in student.transcript.values():
            print(entry)
        print(f"Cumulative GPA: {grading.compute_gpa(student):.2f}")
        print(f"Credit-weighted GPA: {grading.compute_weighted_gpa(student, self._manager.course_service):.2f}")

    # --- Import / export ---

    def import_export_menu(self) -> None:
        self._submenu("Data Import/Export", {
            1: ("Import students from CSV", self.import_students),
            2: ("Export students to CSV", self.export_students),
            3: ("Import courses from CSV", self.import_courses),
            4: ("Export courses to CSV", self.export_courses),
        })

    def _prompt_path(self, default: Path) -> Path:
        print(f"Default path: {default}")
        custom = self._ask("Press Enter to use it, or type another path: ")
        return Path(custom) if custom else default

    def import_students(self) -> None:
        path = self._prompt_path(self._manager.config.students_path)
        count = self._manager.import_export_service.import_students(path, self._manager.student_service)
        print(f"Successfully imported {count} students from {path}.")

    def export_students(self) -> None:
        path = self._prompt_path(self._manager.config.students_path)
        count = self._manager.import_export_service.export_students(path, self._manager.student_service)
        print(f"Successfully exported {count} students to {path}.")

    def import_courses(self) -> None:
        path = self._prompt_path(self._manager.config.courses_path)
        count = self._manager.import_export_service.import_courses(path, self._manager.course_service)
        print(f"Successfully imported {count} courses from {path}.")

    def export_courses(self) -> None:
        path = self._prompt_path(self._manager.config.courses_path)
        count = self._manager.import_export_service.export_courses(path, self._manager.course_service)
        print(f"Successfully exported {count} courses to {path}.")

    # --- Backup ---

    def backup_menu(self) -> None:
        print("\n-- Data Backup --")
        print(f"Source directory: {self._manager.config.data_dir}")
        raw = self._ask("Destination directory (blank for a timestamped folder): ")
        report = self._manager.backup(Path(raw) if raw else None)
        if report.succeeded:
            print(f"Backup completed: {report.file_count} files copied to {report.destination}.")
        else:
            print(f"Backup finished with {len(report.failures)} failure(s); "
                  f"{report.file_count} files copied to {report.destination}.")
            for path, reason in report.failures:
                print(f"  {path}: {reason}")
