#!/usr/bin/env python3
"""
fillconvert CLI

Convert broker trading reports to TraderVue import format.

Copyright (c) 2025 Steve Angelovich
Licensed under the MIT License - see LICENSE file for details.

Usage:
    python -m fillconvert --help
    python -m fillconvert convert --type cqg-fill-report --input fills.xlsx
    python -m fillconvert convert -t cqg-fill-report -i fills.xlsx -o tradervue.csv
"""

import logging
import sys

import click

# Local application imports
from fillconvert import constants as const
from fillconvert import util
from fillconvert.cli.report import convert, identify, preview


# Initialize logging for CLI application
util.setup_logger(name=None, level=None, console=True, log_file=const.LOG_FILE)
logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=str(const.VERSION), prog_name="fillconvert")
@click.option("--log-level", type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
              help="Console log level (default: LOG_LEVEL env or INFO)")
def cli(log_level):
    """
    Convert trading reports to TraderVue format
    """
    if log_level:
        util.set_log_level(log_level)


cli.add_command(convert)
cli.add_command(preview)
cli.add_command(identify)


@cli.command()
def version():
    """Show version information"""
    click.echo(f"fillconvert v{const.VERSION}")
    click.echo(f"Author: {const.AUTHOR}")


def main():
    try:
        cli()
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        logger.debug("Traceback follows", exc_info=True)
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
