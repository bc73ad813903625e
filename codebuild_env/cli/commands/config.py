"""Configuration management commands for codebuild-env."""

from functools import wraps

import click
from pydantic import ValidationError

from ...core.exceptions import CodeBuildEnvError
from ...models.enums import EnvironmentVariableType
from ..helpers import get_config_manager


def handle_errors(func):
    """Report store and validation errors as a failed command."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (CodeBuildEnvError, ValidationError) as e:
            click.echo(f"Error: {e}", err=True)
            raise SystemExit(1)
    return wrapper


@click.group()
def config():
    """Edit the stored build environment"""
    pass


@config.command()
@click.argument('image')
@handle_errors
def image(image):
    """Set the build image"""
    get_config_manager().set_image(image)
    click.echo(f"Set image: {image}")


@config.command(name='compute-type')
@click.argument('compute_type')
@handle_errors
def compute_type(compute_type):
    """Set the compute tier"""
    get_config_manager().set_compute_type(compute_type)
    click.echo(f"Set compute type: {compute_type}")


@config.command()
@click.argument('name')
@click.argument('value')
@click.option('--type', 'var_type',
              type=click.Choice([t.value for t in EnvironmentVariableType]),
              help='Where the value comes from (default: PLAINTEXT)')
@handle_errors
def env(name, value, var_type):
    """Set an environment variable for builds"""
    get_config_manager().set_environment_variable(name, value, var_type)
    click.echo(f"Set environment variable: {name}={value}")


@config.command(name='unset-env')
@click.argument('name')
@handle_errors
def unset_env(name):
    """Remove an environment variable"""
    if get_config_manager().remove_environment_variable(name):
        click.echo(f"Removed environment variable: {name}")
    else:
        click.echo(f"Environment variable '{name}' not found")


@config.command()
@click.argument('enabled', type=bool)
@handle_errors
def privileged(enabled):
    """Enable or disable privileged mode (true/false)"""
    get_config_manager().set_privileged_mode(enabled)
    click.echo(f"Set privileged mode: {str(enabled).lower()}")
