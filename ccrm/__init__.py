"""
CCRM: Campus Course & Records Manager

An in-memory records manager for students, courses, enrollments and grades,
with CSV import/export and directory backup.
"""

__version__ = "1.0.0"
__author__ = "CCRM Development Team"
__description__ = "Campus Course & Records Manager"
