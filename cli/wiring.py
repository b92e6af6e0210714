"""
Object wiring shared by CLI subcommands.

Loads configuration, configures logging and builds the pipeline, hub
and registration controller from it.
"""

import sys
from typing import Any, Dict, Optional

import click

from cli.help_texts import ExitCodes
from hostel.config import ConfigurationManager, HostelConfig
from hostel.errors import ConfigurationError
from hostel.notifications import ConsoleObserver, NotificationHub
from hostel.registration import RegistrationController, RegistrationService
from hostel.utils.logging_config import configure_logging
from hostel.validation import StageResult, ValidationPipeline, default_stages


def load_config(config_file: Optional[str], overrides: Optional[Dict[str, Any]] = None) -> HostelConfig:
    """Load configuration and configure logging, exiting on invalid config."""
    try:
        config = ConfigurationManager().load_configuration(config_file, overrides)
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(ExitCodes.INVALID_CONFIGURATION)

    configure_logging(config.log_level, log_file=config.log_file, force=True)
    return config


def build_pipeline(config: HostelConfig) -> ValidationPipeline:
    return ValidationPipeline(default_stages(config.min_distance))


def build_hub(config: HostelConfig) -> NotificationHub:
    hub = NotificationHub()
    for name in config.observers:
        hub.register(ConsoleObserver(name))
    return hub


def build_controller(config: HostelConfig) -> RegistrationController:
    return RegistrationController(RegistrationService(min_distance=config.min_distance))


def echo_stage_result(result: StageResult) -> None:
    """Print a stage result as soon as the pipeline produces it."""
    prefix = "  ✅" if result.passed else "  ❌"
    click.echo(f"{prefix} [{result.stage}] {result.message}")
