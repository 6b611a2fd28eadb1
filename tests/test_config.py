import json
from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from ccrm.config import AppConfig
from ccrm.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    for name in ["CCRM_DATA_DIR", "CCRM_BACKUP_DIR", "CCRM_LOG_LEVEL", "CCRM_MAX_CREDITS"]:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = AppConfig()
    assert config.data_dir == Path("data")
    assert config.students_path == Path("data") / "students.csv"
    assert config.courses_path == Path("data") / "courses.csv"
    assert config.log_level == "INFO"
    assert config.max_credits is None


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("CCRM_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CCRM_MAX_CREDITS", "18")
    config = AppConfig()
    assert config.data_dir == tmp_path
    assert config.max_credits == 18


def test_log_level_is_normalized():
    assert AppConfig(log_level=" debug ").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(PydanticValidationError):
        AppConfig(log_level="CHATTY")


def test_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"data_dir": str(tmp_path / "records"), "max_credits": 20}))
    config = AppConfig.from_file(path)
    assert config.data_dir == tmp_path / "records"
    assert config.max_credits == 20


def test_from_file_overrides_win(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"data_dir": "from-file", "log_level": "WARNING"}))
    config = AppConfig.from_file(path, data_dir=str(tmp_path), log_level=None)
    assert config.data_dir == tmp_path
    assert config.log_level == "WARNING"


def test_from_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError):
        AppConfig.from_file(tmp_path / "missing.json")


@pytest.mark.parametrize("content", ["not json", "[1, 2]", '{"max_credits": 0}'])
def test_from_bad_file_raises(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)
    with pytest.raises(ConfigurationError):
        AppConfig.from_file(path)


def test_ensure_data_dir(tmp_path):
    config = AppConfig(data_dir=tmp_path / "nested" / "data")
    assert config.ensure_data_dir().is_dir()
