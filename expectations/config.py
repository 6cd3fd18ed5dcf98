"""
Runtime settings for expectations.

Settings are read from the environment (after loading a .env file when one
is present):

    EXPECTATIONS_LOG_DIR        directory for debug.log (default: logs)
    EXPECTATIONS_LOG_LEVEL      file log level (default: DEBUG)
    EXPECTATIONS_CONSOLE_LEVEL  console log level (default: WARNING)
    EXPECTATIONS_MAX_STEPS      steps run by the demo (default: 20)
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


ENV_PREFIX = "EXPECTATIONS_"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def level_number(name: str) -> int:
    """Map a level name such as "debug" to its logging constant."""
    upper = name.strip().upper()
    if upper not in _LEVEL_NAMES:
        raise ValueError(f"Unknown log level: {name!r}")
    return getattr(logging, upper)


class AgencySettings(BaseModel):
    """Settings for logging and the demo runner."""

    model_config = ConfigDict(frozen=True)

    log_dir: Path = Path("logs")
    log_level: str = "DEBUG"
    console_level: str = "WARNING"
    max_steps: int = Field(default=20, ge=1)

    @field_validator("log_level", "console_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level_number(value)
        return value.strip().upper()

    @property
    def log_level_number(self) -> int:
        return level_number(self.log_level)

    @property
    def console_level_number(self) -> int:
        return level_number(self.console_level)

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        *,
        load_dotenv_file: bool = True,
    ) -> "AgencySettings":
        """
        Build settings from environment variables.

        Args:
            prefix: Prefix of the variables to read
            load_dotenv_file: Whether to load a .env file first

        Returns:
            AgencySettings with defaults for unset variables
        """
        if load_dotenv_file:
            load_dotenv()

        values: dict[str, str] = {}
        for field_name in ("log_dir", "log_level", "console_level", "max_steps"):
            raw = os.environ.get(f"{prefix}{field_name.upper()}")
            if raw is not None and raw.strip():
                values[field_name] = raw.strip()
        return cls.model_validate(values)
