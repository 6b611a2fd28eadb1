"""
Application configuration.

Settings come from (highest precedence first) explicit keyword arguments,
``CCRM_*`` environment variables, and the defaults below. ``from_file`` loads
a JSON file and passes its contents as keyword arguments.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, field_validator, ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CCRM_", extra="ignore")

    data_dir: Path = Path("data")
    backup_dir: Path = Path("backups")
    students_file: str = "students.csv"
    courses_file: str = "courses.csv"
    log_level: str = "INFO"
    max_credits: Optional[int] = Field(default=None, ge=1)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @property
    def students_path(self) -> Path:
        return self.data_dir / self.students_file

    @property
    def courses_path(self) -> Path:
        return self.data_dir / self.courses_file

    def ensure_data_dir(self) -> Path:
        """Create the data directory if needed. Failure is logged, not raised."""
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Could not create data directory '%s': %s", self.data_dir, e)
        return self.data_dir

    @classmethod
    def from_file(cls, path: Union[str, Path], **overrides) -> "AppConfig":
        """Load settings from a JSON file; ``overrides`` win over file values."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                values = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot load configuration from {path}: {e}",
                                     error_code="CONFIG_LOAD") from e
        if not isinstance(values, dict):
            raise ConfigurationError(f"Configuration in {path} must be a JSON object",
                                     error_code="CONFIG_LOAD")
        values.update({k: v for k, v in overrides.items() if v is not None})
        try:
            return cls(**values)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {path}: {e}",
                                     error_code="CONFIG_INVALID") from e
