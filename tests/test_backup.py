import logging
import os
import shutil
from datetime import datetime

import pytest

from ccrm.core.exceptions import PersistenceError
from ccrm.persistence import backup_directory, timestamped_destination


@pytest.fixture
def source_tree(tmp_path):
    source = tmp_path / "source"
    (source / "sub").mkdir(parents=True)
    (source / "students.csv").write_bytes(b"P1,R1,Ann,ann@x.edu\n")
    (source / "sub" / "courses.csv").write_bytes(b"CS101,Intro,4,I1,FALL,CS\n")
    return source


def _relative_files(root):
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*"))


def test_backup_reproduces_tree(source_tree, tmp_path):
    destination = tmp_path / "backup"
    report = backup_directory(source_tree, destination)

    assert report.succeeded
    assert report.file_count == 2
    assert _relative_files(destination) == ["students.csv", "sub", "sub/courses.csv"]
    assert (destination / "students.csv").read_bytes() == (source_tree / "students.csv").read_bytes()
    assert (destination / "sub" / "courses.csv").read_bytes() == (source_tree / "sub" / "courses.csv").read_bytes()


def test_backup_rerun_overwrites(source_tree, tmp_path):
    destination = tmp_path / "backup"
    backup_directory(source_tree, destination)

    (source_tree / "students.csv").write_bytes(b"P2,R2,Bo,bo@x.edu\n")
    report = backup_directory(source_tree, destination)

    assert report.succeeded
    assert (destination / "students.csv").read_bytes() == b"P2,R2,Bo,bo@x.edu\n"
    assert _relative_files(destination) == ["students.csv", "sub", "sub/courses.csv"]


def test_backup_missing_source_raises(tmp_path):
    with pytest.raises(PersistenceError):
        backup_directory(tmp_path / "missing", tmp_path / "backup")


def test_backup_source_must_be_directory(tmp_path):
    not_a_dir = tmp_path / "file.txt"
    not_a_dir.write_text("x")
    with pytest.raises(PersistenceError):
        backup_directory(not_a_dir, tmp_path / "backup")


def test_backup_continues_after_file_failure(source_tree, tmp_path, monkeypatch, caplog):
    real_copy2 = shutil.copy2

    def flaky_copy2(src, dst, *args, **kwargs):
        if str(src).endswith("students.csv"):
            raise PermissionError("denied")
        return real_copy2(src, dst, *args, **kwargs)

    monkeypatch.setattr("ccrm.persistence.backup.shutil.copy2", flaky_copy2)
    destination = tmp_path / "backup"

    with caplog.at_level(logging.ERROR):
        report = backup_directory(source_tree, destination)

    assert not report.succeeded
    assert len(report.failures) == 1
    assert report.failures[0][0].name == "students.csv"
    assert (destination / "sub" / "courses.csv").exists()
    assert "Failed to copy" in caplog.text


def test_backup_into_subdirectory_of_source(source_tree):
    destination = source_tree / "backups" / "latest"
    report = backup_directory(source_tree, destination)
    assert report.succeeded
    assert (destination / "sub" / "courses.csv").exists()
    assert not (destination / "backups" / "latest").exists()


def test_timestamped_destination(tmp_path):
    when = datetime(2024, 3, 5, 14, 7, 9)
    assert timestamped_destination(tmp_path, when) == tmp_path / "backup_20240305_140709"


def test_backup_records_unreadable_directory(source_tree, tmp_path, monkeypatch, caplog):
    (source_tree / "locked").mkdir()
    (source_tree / "locked" / "grades.csv").write_bytes(b"R1,CS101,85\n")
    real_scandir = os.scandir

    def guarded_scandir(path="."):
        if os.path.basename(os.fspath(path)) == "locked":
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", guarded_scandir)
    destination = tmp_path / "backup"

    with caplog.at_level(logging.ERROR):
        report = backup_directory(source_tree, destination)
    monkeypatch.undo()

    assert not report.succeeded
    assert [path.name for path, _ in report.failures] == ["locked"]
    assert not (destination / "locked" / "grades.csv").exists()
    assert (destination / "sub" / "courses.csv").exists()
    assert "Failed to read directory" in caplog.text
