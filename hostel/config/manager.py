"""
Configuration Manager for hostel registration.

Loads and merges configuration from multiple sources:
- System defaults
- Project configuration (./.hostel/config.yaml)
- Explicit configuration (--config file.yaml)
- Environment variables
- CLI arguments (highest precedence)
"""

import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from hostel.config.environment import EnvironmentVariables
from hostel.config.schema import HostelConfig
from hostel.config.yaml_parser import ConfigurationYAMLParser
from hostel.errors import ConfigurationError


logger = logging.getLogger(__name__)


class ConfigurationManager:
    """Manages configuration loading, validation, and environment variable integration."""

    def __init__(self, project_config_path: Optional[Path] = None):
        self.project_config_path = project_config_path or Path.cwd() / ".hostel" / "config.yaml"
        self.yaml_parser = ConfigurationYAMLParser()

    def load_configuration(self,
                           config_file: Optional[str] = None,
                           cli_overrides: Optional[Dict[str, Any]] = None) -> HostelConfig:
        """
        Load configuration from all sources with proper precedence.

        Precedence order (highest to lowest):
        1. CLI arguments (cli_overrides, None values ignored)
        2. Environment variables
        3. Explicit config file (--config)
        4. Project config (./.hostel/config.yaml)
        5. System defaults

        Args:
            config_file: Optional explicit configuration file path
            cli_overrides: Dictionary of CLI argument overrides

        Returns:
            HostelConfig: Merged and validated configuration

        Raises:
            ConfigurationError: If a file is invalid or a value fails validation
        """
        config_dict = asdict(HostelConfig())

        if self.project_config_path.exists():
            logger.debug(f"Loading project configuration from {self.project_config_path}")
            config_dict.update(self.yaml_parser.parse_file(self.project_config_path))

        if config_file:
            path = Path(config_file)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {config_file}")
            logger.debug(f"Loading configuration from {path}")
            config_dict.update(self.yaml_parser.parse_file(path))

        config_dict.update(EnvironmentVariables.load_overrides())

        if cli_overrides:
            config_dict.update({k: v for k, v in cli_overrides.items() if v is not None})

        config = self._dict_to_config(config_dict)

        errors = config.validate()
        if errors:
            raise ConfigurationError("Invalid configuration: " + "; ".join(errors))

        return config

    def to_yaml(self, config: HostelConfig) -> str:
        """Render a configuration as YAML."""
        return yaml.safe_dump(asdict(config), default_flow_style=False, sort_keys=False)

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> HostelConfig:
        known = {f.name for f in fields(HostelConfig)}
        unknown = sorted(str(key) for key in set(config_dict) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        log_level = config_dict.get("log_level")
        if isinstance(log_level, str):
            config_dict = dict(config_dict, log_level=log_level.lower())

        return HostelConfig(**config_dict)
