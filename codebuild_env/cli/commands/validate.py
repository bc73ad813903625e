"""Validate an environment definition file."""

from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from ...core.exceptions import CodeBuildEnvError, InvalidArgument
from ...utils.config_manager import load_environment_file
from ..helpers import environment_rows, print_table


@click.command()
@click.argument('file', type=click.Path(dir_okay=False, path_type=Path))
@click.option('--strict', is_flag=True,
              help='Also fail on unknown enum values and unmet cross-field rules')
@click.pass_context
def validate(ctx, file: Path, strict: bool):
    """Validate a build environment definition.

    FILE: JSON or YAML file holding the environment object

    Examples:
        codebuild-env validate environment.yaml

        codebuild-env validate --strict project.json
    """
    console = Console()

    try:
        environment = load_environment_file(file)
    except (CodeBuildEnvError, ValidationError) as e:
        console.print(f"[red]Invalid environment: {escape(str(e))}[/red]")
        ctx.exit(1)

    problems = environment.compute_configuration_issues()
    try:
        environment.request_body()
    except InvalidArgument as e:
        problems.append(str(e))

    print_table(["Field", "Value"], environment_rows(environment))

    for problem in problems:
        colour = "red" if strict else "yellow"
        console.print(f"[{colour}]{escape(problem)}[/{colour}]")

    if strict and problems:
        ctx.exit(1)

    console.print(f"[green]{file} is a valid build environment[/green]")
