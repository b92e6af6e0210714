"""
Configuration Module for Hostel Registration

Loads HostelConfig from defaults, YAML files, environment variables and
CLI overrides.
"""

from hostel.config.schema import HostelConfig, LogLevel
from hostel.config.manager import ConfigurationManager

__all__ = ["HostelConfig", "LogLevel", "ConfigurationManager"]
