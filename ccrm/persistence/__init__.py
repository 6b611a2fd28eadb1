"""
Persistence module for flat-file import/export and backups.
"""

from .import_export import ImportExportService, StudentRow, CourseRow
from .backup import BackupReport, backup_directory, timestamped_destination

__all__ = [
    "ImportExportService",
    "StudentRow",
    "CourseRow",
    "BackupReport",
    "backup_directory",
    "timestamped_destination",
]
