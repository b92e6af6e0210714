"""
YAML parser with error reporting for hostel configuration files.
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from hostel.errors import ConfigurationError


class YAMLParsingError(ConfigurationError):
    """Configuration file could not be parsed."""

    def __init__(self, message: str, file_path: Optional[Path] = None,
                 line_number: Optional[int] = None, column: Optional[int] = None):
        self.file_path = file_path
        self.line_number = line_number
        self.column = column

        error_parts = [message]

        if file_path:
            error_parts.append(f"File: {file_path}")

        if line_number is not None:
            if column is not None:
                error_parts.append(f"Line {line_number}, Column {column}")
            else:
                error_parts.append(f"Line {line_number}")

        super().__init__(" | ".join(error_parts))


class ConfigurationYAMLParser:
    """Parses YAML configuration files into plain dictionaries."""

    def parse_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Parse a YAML configuration file.

        Args:
            file_path: Path to YAML configuration file

        Returns:
            Dictionary containing parsed configuration (empty for an empty file)

        Raises:
            YAMLParsingError: If the file is unreadable, invalid YAML or not a mapping
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = yaml.safe_load(f)
        except yaml.YAMLError as e:
            line_number = None
            column = None

            if hasattr(e, 'problem_mark') and e.problem_mark:
                line_number = e.problem_mark.line + 1  # YAML marks are 0-based
                column = e.problem_mark.column + 1

            if hasattr(e, 'problem') and e.problem:
                message = f"YAML parsing error: {e.problem}"
            else:
                message = f"YAML parsing error: {e}"

            raise YAMLParsingError(message, file_path, line_number, column)
        except OSError as e:
            raise YAMLParsingError(f"Cannot read configuration file: {e}", file_path)

        if content is None:
            return {}

        if not isinstance(content, dict):
            raise YAMLParsingError(
                f"Configuration must be a mapping, got {type(content).__name__}", file_path
            )

        bad_keys = [key for key in content if not isinstance(key, str)]
        if bad_keys:
            raise YAMLParsingError(
                f"Configuration keys must be strings, got: {', '.join(repr(k) for k in bad_keys)}",
                file_path,
            )

        return content
