"""Export the stored build environment as a request body."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from ...core import codec
from ...core.exceptions import CodeBuildEnvError
from ..helpers import get_config_manager


@click.command()
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Write the request body to this file instead of stdout')
@click.pass_context
def export(ctx, output):
    """Export the environment as the JSON request body sent to the service"""
    console = Console(stderr=True)

    try:
        environment = get_config_manager().require_environment()
        body = codec.to_json(environment)
    except CodeBuildEnvError as e:
        console.print(f"[red]Error exporting environment: {escape(str(e))}[/red]")
        ctx.exit(1)

    if output:
        output.write_text(body + "\n")
        console.print(f"[green]Wrote request body to {output}[/green]")
    else:
        click.echo(body)
