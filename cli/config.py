"""
Config Subcommand Module

Shows the configuration that results from merging defaults, YAML files,
environment variables and overrides.
"""

from typing import Optional

import click

from cli.help_texts import CONFIG_HELP, CONFIG_SHOW_HELP
from cli.shared_options import config_option
from cli.wiring import load_config
from hostel.config import ConfigurationManager


@click.group(help=CONFIG_HELP)
def config():
    pass


@config.command(help=CONFIG_SHOW_HELP)
@config_option()
def show(config_file: Optional[str]):
    effective = load_config(config_file)
    click.echo(ConfigurationManager().to_yaml(effective), nl=False)
