"""
Recursive directory backup.

Copying is best-effort: a file that cannot be copied, or a directory that
cannot be listed, is logged and recorded in the report, and the walk carries
on with the remaining entries.
"""

import logging
import os
import shutil
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

BACKUP_PREFIX = "backup_"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


@dataclass
class BackupReport:
    """Outcome of a backup run."""
    source: Path
    destination: Path
    copied_files: List[Path] = field(default_factory=list)
    created_directories: List[Path] = field(default_factory=list)
    failures: List[Tuple[Path, str]] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def file_count(self) -> int:
        return len(self.copied_files)


def timestamped_destination(root: PathLike, now: Optional[datetime] = None) -> Path:
    """Build ``root/backup_YYYYMMDD_HHMMSS``."""
    now = now or datetime.now()
    return Path(root) / f"{BACKUP_PREFIX}{now.strftime(TIMESTAMP_FORMAT)}"


def backup_directory(source: PathLike, destination: PathLike) -> BackupReport:
    """Copy every directory and file under ``source`` into ``destination``.

    Existing destination files are overwritten. Raises PersistenceError if
    ``source`` is not a directory or ``destination`` cannot be created.
    """
    source_path = Path(source)
    destination_path = Path(destination)
    if not source_path.is_dir():
        raise PersistenceError(f"Source not found or not a directory: {source_path}",
                               error_code="BACKUP_SOURCE", details={"source": str(source_path)})

    try:
        destination_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PersistenceError(f"Cannot create backup destination {destination_path}: {e}",
                               error_code="BACKUP_DESTINATION") from e

    report = BackupReport(source=source_path, destination=destination_path)
    resolved_destination = destination_path.resolve()

    def _on_walk_error(err: OSError) -> None:
        logger.error("Failed to read directory %s: %s", err.filename, err)
        report.failures.append((Path(err.filename or source_path), str(err)))

    for dirpath, dirnames, filenames in os.walk(source_path, onerror=_on_walk_error):
        current = Path(dirpath)
        # never descend into the backup itself when it lives under source
        dirnames[:] = [d for d in dirnames if (current / d).resolve() != resolved_destination]
        target_dir = destination_path / current.relative_to(source_path)

        for dirname in dirnames:
            target = target_dir / dirname
            if target.is_dir():
                continue
            try:
                target.mkdir(parents=True, exist_ok=True)
                report.created_directories.append(target)
            except OSError as e:
                logger.error("Failed to create directory %s: %s", target, e)
                report.failures.append((current / dirname, str(e)))

        for filename in filenames:
            src = current / filename
            dst = target_dir / filename
            try:
                shutil.copy2(src, dst)
                report.copied_files.append(dst)
            except OSError as e:
                logger.error("Failed to copy %s: %s", src, e)
                report.failures.append((src, str(e)))

    logger.info("Backup of %s to %s finished: %d files copied, %d failures",
                source_path, destination_path, report.file_count, len(report.failures))
    return report
