"""
Main entry point for the Campus Course & Records Manager.
"""

import argparse
import logging
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from .config import AppConfig
from .core.entities import Student, Course, Person
from .core.enums import Semester
from .core.exceptions import CCRMException, ConfigurationError
from .persistence import ImportExportService, BackupReport, backup_directory, timestamped_destination
from .services import (
    StudentService, CourseService, EnrollmentService, GradingService, CreditLimitPolicy
)

logger = logging.getLogger(__name__)


class CampusRecordsManager:
    """Wires the configuration and all services together."""

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config or AppConfig()
        self.student_service = StudentService()
        self.course_service = CourseService()
        self.enrollment_service = EnrollmentService()
        self.grading_service = GradingService()
        self.import_export_service = ImportExportService()

        if self._config.max_credits is not None:
            self.enrollment_service.add_policy(
                CreditLimitPolicy(self.course_service, self._config.max_credits)
            )
        self._config.ensure_data_dir()
        logger.info("Records manager initialized, data directory: %s", self._config.data_dir)

    @property
    def config(self) -> AppConfig:
        return self._config

    def backup(self, destination=None) -> BackupReport:
        """Back up the data directory, by default into a timestamped folder."""
        target = destination or timestamped_destination(self._config.backup_dir)
        return backup_directory(self._config.data_dir, target)

    def create_sample_data(self) -> None:
        """Load a small set of instructors, courses and students."""
        instructor = Person.instructor("I001", "Grace Hopper", "grace@campus.edu")

        courses = [
            Course("CS101", "Introduction to Computer Science", 4, instructor.id, Semester.FALL, "Computer Science"),
            Course("MA101", "Calculus I", 3, None, Semester.FALL, "Mathematics"),
            Course("PH102", "Physics II", 3, None, Semester.SPRING, "Physics"),
        ]
        for course in courses:
            self.course_service.add_course(course)

        students = [
            Student("P001", "2024001", "Alice Johnson", "alice@campus.edu"),
            Student("P002", "2024002", "Bob Smith", "bob@campus.edu"),
            Student("P003", "2024003", "Carol Davis", "carol@campus.edu"),
        ]
        for student in students:
            self.student_service.add_student(student)

    def run_demo(self) -> None:
        """Run a short non-interactive demonstration."""
        print("Running records manager demonstration...")
        self.create_sample_data()

        alice = self.student_service.require_student("2024001")
        for code, marks in (("CS101", 92), ("MA101", 78)):
            self.enrollment_service.enroll(alice, self.course_service.require_course(code))
            self.grading_service.assign_marks(alice, code, marks)

        print("\n=== Students ===")
        for student in self.student_service.list_students():
            print(student.profile())

        print("\n=== Courses ===")
        for course in self.course_service.list_courses():
            print(course)

        print(f"\n=== Transcript for {alice.name} ===")
        for entry in alice.transcript.values():
            print(entry)
        print(f"GPA: {self.grading_service.compute_gpa(alice):.2f}")
        print(f"Credit-weighted GPA: "
              f"{self.grading_service.compute_weighted_gpa(alice, self.course_service):.2f}")

        print("\n✓ Demo completed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Campus Course & Records Manager")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--data-dir", type=str, help="Directory holding CSV data")
    parser.add_argument("--log-level", type=str, help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--demo", action="store_true", help="Run demo mode")
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    overrides = {"data_dir": args.data_dir, "log_level": args.log_level}
    if args.config:
        return AppConfig.from_file(args.config, **overrides)
    try:
        return AppConfig(**{k: v for k, v in overrides.items() if v is not None})
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", error_code="CONFIG_INVALID") from e


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except CCRMException as e:
        print(f"Error: {e.message}")
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    manager = CampusRecordsManager(config)

    if args.demo:
        manager.run_demo()
        return 0

    from .cli import MenuApp

    try:
        MenuApp(manager).run()
    except (KeyboardInterrupt, EOFError):
        print("\nExiting application. Goodbye!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
