"""
Environment variable integration for hostel registration.

Centralizes environment variable names and converts their values into
configuration overrides.
"""

import os
from typing import Any, Dict

from hostel.errors import ConfigurationError


class EnvironmentVariables:
    """Centralized environment variable definitions and utilities."""

    MIN_DISTANCE = "HOSTEL_MIN_DISTANCE"
    LOG_LEVEL = "HOSTEL_LOG_LEVEL"
    LOG_FILE = "HOSTEL_LOG_FILE"
    OBSERVERS = "HOSTEL_OBSERVERS"

    @classmethod
    def get_variable_documentation(cls) -> Dict[str, str]:
        """Get documentation for all environment variables."""
        return {
            cls.MIN_DISTANCE: "Minimum distance from the hostel to be eligible (default: 10)",
            cls.LOG_LEVEL: "Default logging level (debug, info, warning, error)",
            cls.LOG_FILE: "Optional path of a rotating log file",
            cls.OBSERVERS: "Comma-separated observer names notified on allocation",
        }

    @classmethod
    def load_overrides(cls) -> Dict[str, Any]:
        """
        Read configuration overrides from the environment.

        Returns:
            Dict containing only the keys whose variables are set

        Raises:
            ConfigurationError: If a variable holds an unusable value
        """
        overrides: Dict[str, Any] = {}

        min_distance = os.environ.get(cls.MIN_DISTANCE)
        if min_distance:
            try:
                overrides["min_distance"] = int(min_distance)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid {cls.MIN_DISTANCE}: '{min_distance}'. Expected an integer"
                )

        log_level = os.environ.get(cls.LOG_LEVEL)
        if log_level:
            overrides["log_level"] = log_level.lower()

        log_file = os.environ.get(cls.LOG_FILE)
        if log_file:
            overrides["log_file"] = log_file

        observers = os.environ.get(cls.OBSERVERS)
        if observers:
            overrides["observers"] = [n.strip() for n in observers.split(",") if n.strip()]

        return overrides
