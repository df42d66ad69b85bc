"""
Configuration management using Pydantic models loaded from YAML.
"""

from datetime import datetime
from pathlib import Path
from typing import List, Tuple, Union

import yaml
from pydantic import BaseModel, Field, field_validator

from .domain.availability import Availability
from .domain.exceptions import InvalidIntervalError
from .domain.parsing import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_TIMEZONE,
    parse_interval,
    parse_timezone,
)

RangeEntry = Tuple[Union[str, datetime], Union[str, datetime]]


class DefaultsConfig(BaseModel):
    """Default settings for session slicing and literal parsing."""
    session_interval: str = "15 minutes"
    date_format: str = DEFAULT_DATE_FORMAT

    @field_validator("session_interval")
    @classmethod
    def validate_session_interval(cls, value: str) -> str:
        """Ensure the interval parses and is positive."""
        try:
            parse_interval(value)
        except InvalidIntervalError as exc:
            raise ValueError(str(exc)) from exc
        return value


class ScheduleConfig(BaseModel):
    """Availability and bookings to evaluate."""
    timezone: str = DEFAULT_TIMEZONE
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    available: List[RangeEntry] = Field(default_factory=list)
    booked: List[RangeEntry] = Field(default_factory=list)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the timezone name is known to pendulum."""
        return parse_timezone(value)

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "ScheduleConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            ScheduleConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create an availability.yaml file with 'available' and 'booked' lists."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    def build_availability(self) -> Availability:
        """
        Build an Availability from the configured ranges.

        Raises:
            ParseError: If a literal does not match the configured date format
            InvalidRangeError: If a range starts after it ends
        """
        return Availability(
            self.available,
            self.booked,
            timezone=self.timezone,
            date_format=self.defaults.date_format,
        )


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for availability.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "availability.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "availability.yaml"

    return config_path
