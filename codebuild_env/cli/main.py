"""Main CLI entry point for codebuild-env."""

import logging

import click

from ..core.constants import LOG_FORMAT
from .commands.config import config
from .commands.export import export
from .commands.init import init_environment
from .commands.show import show
from .commands.validate import validate


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """codebuild-env - Validate and manage build project environments"""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


# Register commands
cli.add_command(validate)
cli.add_command(init_environment)
cli.add_command(config)
cli.add_command(show)
cli.add_command(export)


if __name__ == '__main__':
    cli()
