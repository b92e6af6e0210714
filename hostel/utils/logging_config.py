"""
Logging Configuration

Configurable logging levels and optional rotating file output for the
hostel registration system.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional


class LoggingConfig:
    """
    Centralized logging configuration for hostel registration.

    Sets up the root logger with a stderr console handler and, when
    requested, a rotating log file.
    """

    def __init__(self):
        self._configured = False
        self._log_file_handler: Optional[logging.Handler] = None
        self._console_handler: Optional[logging.Handler] = None

    @property
    def configured(self) -> bool:
        return self._configured

    def configure_logging(
        self,
        level: str = "info",
        log_file: Optional[str] = None,
        include_timestamps: bool = True,
        max_log_file_size: int = 1024 * 1024,  # 1MB
        backup_count: int = 3,
        force: bool = False,
    ) -> None:
        """
        Configure logging for the application.

        Args:
            level: Logging level (debug, info, warning, error)
            log_file: Optional log file path
            include_timestamps: Whether to include timestamps in console messages
            max_log_file_size: Maximum log file size before rotation
            backup_count: Number of backup log files to keep
            force: Reconfigure even if logging was already configured
        """
        if self._configured and not force:
            return

        log_level = self._get_log_level(level)

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        for handler in (self._console_handler, self._log_file_handler):
            if handler is not None:
                root_logger.removeHandler(handler)
                handler.close()
        self._log_file_handler = None

        debug_mode = level.lower() == "debug"
        self._console_handler = logging.StreamHandler(sys.stderr)
        self._console_handler.setLevel(log_level)
        self._console_handler.setFormatter(
            self._create_console_formatter(include_timestamps, debug_mode)
        )
        root_logger.addHandler(self._console_handler)

        if log_file:
            self._configure_file_logging(log_file, log_level, max_log_file_size, backup_count)

        self._configured = True

        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={level}, file={log_file}")

    def _get_log_level(self, level_str: str) -> int:
        """Convert string log level to logging constant."""
        level_map = {
            "debug": logging.DEBUG,
            "info": logging.INFO,
            "warning": logging.WARNING,
            "error": logging.ERROR
        }
        return level_map.get(level_str.lower(), logging.INFO)

    def _create_console_formatter(self, include_timestamps: bool, debug_mode: bool) -> logging.Formatter:
        """Create formatter for console output."""
        parts = []

        if include_timestamps:
            parts.append("%(asctime)s")

        if debug_mode:
            parts.append("%(name)s")

        parts.extend(["%(levelname)s", "%(message)s"])

        return logging.Formatter(
            " - ".join(parts),
            datefmt="%H:%M:%S" if not debug_mode else "%Y-%m-%d %H:%M:%S"
        )

    def _configure_file_logging(
        self,
        log_file: str,
        log_level: int,
        max_size: int,
        backup_count: int
    ) -> None:
        """Configure file logging with rotation."""
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            self._log_file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=max_size,
                backupCount=backup_count,
                encoding='utf-8'
            )
        except OSError as e:
            # Continue with console only
            logging.getLogger(__name__).warning(f"Failed to setup log file {log_file}: {e}")
            return

        self._log_file_handler.setLevel(log_level)
        self._log_file_handler.setFormatter(logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logging.getLogger().addHandler(self._log_file_handler)


# Global logging configuration instance
logging_config = LoggingConfig()


def configure_logging(level: str = "info", log_file: Optional[str] = None, force: bool = False) -> None:
    """
    Convenience function to configure logging.

    Args:
        level: Logging level (debug, info, warning, error)
        log_file: Optional log file path
        force: Reconfigure even if logging was already configured
    """
    logging_config.configure_logging(level=level, log_file=log_file, force=force)
