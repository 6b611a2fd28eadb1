#!/usr/bin/env python3
"""
Demo scenario for the Campus Course & Records Manager.

Runs the full data lifecycle inside a temporary directory: add records,
enroll and grade, export to CSV, re-import into a fresh manager, and back up
the data directory.
"""

import logging
import tempfile
from pathlib import Path

from ccrm.config import AppConfig
from ccrm.core.entities import Student, Course
from ccrm.core.enums import Semester
from ccrm.main import CampusRecordsManager


def run_demo():
    """Run a comprehensive demo of the records manager."""
    print("=" * 60)
    print("CAMPUS COURSE & RECORDS MANAGER - DEMO")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as workdir:
        config = AppConfig(
            data_dir=Path(workdir) / "data",
            backup_dir=Path(workdir) / "backups",
            max_credits=10,
        )
        manager = CampusRecordsManager(config)

        print("\n1. Creating sample data...")
        create_sample_data(manager)

        print("\n2. Demonstrating enrollment and grading...")
        demonstrate_grading(manager)

        print("\n3. Exporting and re-importing CSV data...")
        demonstrate_import_export(manager)

        print("\n4. Backing up the data directory...")
        report = manager.backup()
        print(f"  ✓ {report.file_count} files copied to {report.destination}")

    print("\n" + "=" * 60)
    print("DEMO COMPLETED SUCCESSFULLY!")
    print("=" * 60)


def create_sample_data(manager):
    """Create courses and students."""
    courses = [
        Course("CS101", "Introduction to Computer Science", 4, "I001", Semester.FALL, "Computer Science"),
        Course("CS201", "Data Structures and Algorithms", 4, "I001", Semester.SPRING, "Computer Science"),
        Course("MATH101", "Calculus I", 4, "I002", Semester.FALL, "Mathematics"),
        Course("MATH201", "Linear Algebra", 3, None, Semester.SUMMER, "Mathematics"),
    ]
    for course in courses:
        manager.course_service.add_course(course)

    students = [
        Student("P001", "S001", "Alice Johnson", "alice@university.edu"),
        Student("P002", "S002", "Bob Smith", "bob@university.edu"),
        Student("P003", "S003", "Carol Davis", "carol@university.edu"),
    ]
    for student in students:
        manager.student_service.add_student(student)

    # Duplicate registration number: rejected with a warning
    manager.student_service.add_student(Student("P999", "S001", "Impostor", "x@university.edu"))
    print(f"  ✓ {len(manager.course_service)} courses, {len(manager.student_service)} students")


def demonstrate_grading(manager):
    """Enroll students, record marks, and print GPAs."""
    plan = {
        "S001": [("CS101", 91), ("MATH101", 84), ("MATH201", 77)],
        "S002": [("CS101", 65), ("CS201", 58)],
    }
    for reg_no, entries in plan.items():
        student = manager.student_service.require_student(reg_no)
        for code, marks in entries:
            course = manager.course_service.require_course(code)
            if manager.enrollment_service.enroll(student, course):
                manager.grading_service.assign_marks(student, code, marks)
            else:
                print(f"    {reg_no} -> {code}: rejected (credit limit)")
        gpa = manager.grading_service.compute_gpa(student)
        weighted = manager.grading_service.compute_weighted_gpa(student, manager.course_service)
        print(f"    {reg_no}: GPA {gpa:.2f}, credit-weighted {weighted:.2f}")


def demonstrate_import_export(manager):
    """Round-trip both stores through CSV files."""
    io = manager.import_export_service
    io.export_students(manager.config.students_path, manager.student_service)
    io.export_courses(manager.config.courses_path, manager.course_service)

    fresh = CampusRecordsManager(manager.config)
    students = io.import_students(manager.config.students_path, fresh.student_service)
    courses = io.import_courses(manager.config.courses_path, fresh.course_service)
    print(f"  ✓ Re-imported {students} students and {courses} courses")


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    run_demo()
