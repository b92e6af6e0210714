"""
Shared CLI Option Decorators

Reusable Click decorators for options common to several subcommands.
"""

import click

from cli.help_texts import CONFIG_FILE_HELP, LOG_LEVEL_HELP


def config_option(help=None):
    """Decorator for configuration file options."""
    def decorator(f):
        return click.option(
            '--config', 'config_file',
            default=None,
            type=click.Path(dir_okay=False),
            help=help or CONFIG_FILE_HELP
        )(f)
    return decorator


def log_level_option(help=None):
    """Decorator for logging level options."""
    def decorator(f):
        return click.option(
            '--log-level',
            default=None,
            type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
            help=help or LOG_LEVEL_HELP
        )(f)
    return decorator
