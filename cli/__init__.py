"""
CLI Package for Hostel Registration

Click group with one module per subcommand. The cli() function serves
as the console script entry point for setup.py.
"""

import os
import click
from dotenv import load_dotenv

from hostel import __version__
from hostel.utils.logging_config import configure_logging

# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from .register import register
from .demo import demo
from .config import config

configure_logging("warning")


@click.group()
@click.version_option(version=__version__, prog_name='hostel-registration')
def main():
    """Hostel Registration CLI - validate applicants, register them and notify staff."""
    pass


main.add_command(register)
main.add_command(demo)
main.add_command(config)


def cli():
    """Console script entry point."""
    main()
