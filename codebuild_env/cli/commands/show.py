"""Show the stored build environment."""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.exceptions import CodeBuildEnvError
from ..helpers import environment_rows, get_config_manager


@click.command()
@click.option('--format', 'output_format', type=click.Choice(['table', 'json']),
              default='table', help='Output format')
@click.pass_context
def show(ctx, output_format):
    """Display the stored build environment"""
    console = Console()

    try:
        environment = get_config_manager().get_environment()
    except CodeBuildEnvError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        ctx.exit(1)

    if environment is None:
        console.print("[yellow]No build environment configured.[/yellow]")
        console.print("Use 'codebuild-env init' to create one.")
        return

    if output_format == 'json':
        click.echo(json.dumps(environment.to_dict(), indent=2))
        return

    table = Table(title="Build Environment")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for field, value in environment_rows(environment):
        table.add_row(field, str(value))
    console.print(table)
