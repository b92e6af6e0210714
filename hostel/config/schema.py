"""
Configuration schema and data models for hostel registration.

Defines the HostelConfig dataclass and the enumerations its values are
checked against.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from hostel.validation.stages import DEFAULT_MIN_DISTANCE


class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


DEFAULT_OBSERVERS = ["Warden", "Accounts Office"]


@dataclass
class HostelConfig:
    """Complete hostel registration configuration."""

    # Eligibility
    min_distance: int = DEFAULT_MIN_DISTANCE

    # Logging
    log_level: str = LogLevel.INFO.value
    log_file: Optional[str] = None

    # Display names of the console observers notified on allocation
    observers: List[str] = field(default_factory=lambda: list(DEFAULT_OBSERVERS))

    def validate(self) -> List[str]:
        """Validate configuration and return list of errors."""
        errors = []

        if isinstance(self.min_distance, bool) or not isinstance(self.min_distance, int):
            errors.append(f"min_distance must be an integer, got {self.min_distance!r}")
        elif self.min_distance < 0:
            errors.append(f"min_distance must be non-negative, got {self.min_distance}")

        try:
            LogLevel(self.log_level)
        except ValueError:
            valid_levels = [l.value for l in LogLevel]
            errors.append(f"Invalid log_level '{self.log_level}'. Valid options: {valid_levels}")

        if self.log_file is not None and (not isinstance(self.log_file, str) or not self.log_file.strip()):
            errors.append(f"log_file must be a non-empty path, got {self.log_file!r}")

        if not isinstance(self.observers, list) or not all(
            isinstance(name, str) and name.strip() for name in self.observers
        ):
            errors.append("observers must be a list of non-empty names")

        return errors
