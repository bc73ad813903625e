"""Initialize the stored build environment."""

import click

from ...core.exceptions import CodeBuildEnvError
from ..helpers import get_config_manager


@click.command(name='init')
@click.argument('env_type')
@click.argument('image')
@click.argument('compute_type')
@click.option('--force', is_flag=True, help='Overwrite an existing environment')
def init_environment(env_type, image, compute_type, force):
    """Create the build environment for this project.

    ENV_TYPE: Environment type (e.g. LINUX_CONTAINER)
    IMAGE: Image tag or digest (e.g. aws/codebuild/standard:7.0)
    COMPUTE_TYPE: Compute tier (e.g. BUILD_GENERAL1_SMALL)
    """
    manager = get_config_manager()

    if manager.environment_file.exists() and not force:
        click.echo("An environment is already configured. Use --force to overwrite it.", err=True)
        raise SystemExit(1)

    try:
        manager.init_environment(env_type, image, compute_type)
    except CodeBuildEnvError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)

    click.echo(f"Initialized {env_type} environment using {image}")
