"""CLI Helper Functions for codebuild-env.

This module provides reusable helper functions for CLI commands:
- Project context and configuration store access
- Summary rows for a build environment
- Consistent table formatting for output
"""

from pathlib import Path
from typing import Any, List

import click
from tabulate import tabulate

from codebuild_env.core.constants import DATA_DIR_NAME
from codebuild_env.models.environment import ProjectEnvironment
from codebuild_env.utils.config_manager import ConfigManager


def get_project_context() -> tuple[Path, Path]:
    """Get project root and data directory.

    Returns:
        Tuple of (project_root, data_dir)
    """
    project_root = Path.cwd()
    data_dir = project_root / DATA_DIR_NAME
    return project_root, data_dir


def get_config_manager() -> ConfigManager:
    """Create a ConfigManager for the current project."""
    _, data_dir = get_project_context()
    return ConfigManager(data_dir)


def format_variable(variable) -> str:
    text = f"{variable.name}={variable.value}"
    if variable.type:
        text += f" ({variable.type})"
    return text


def environment_rows(environment: ProjectEnvironment) -> List[List[Any]]:
    """Build (field, value) rows describing an environment.

    Required fields always appear; optional ones only when set.
    """
    rows = [
        ["type", environment.type],
        ["image", environment.image],
        ["computeType", environment.compute_type],
    ]

    config = environment.compute_configuration
    if config is not None:
        parts = [f"{k}={v}" for k, v in config.to_dict().items()]
        rows.append(["computeConfiguration", ", ".join(parts) or "(empty)"])
    if environment.fleet is not None:
        rows.append(["fleet", environment.fleet.fleet_arn or "(no ARN)"])
    if environment.privileged_mode is not None:
        rows.append(["privilegedMode", str(environment.privileged_mode).lower()])
    if environment.certificate is not None:
        rows.append(["certificate", environment.certificate])
    if environment.registry_credential is not None:
        credential = environment.registry_credential
        rows.append(["registryCredential", f"{credential.credential} ({credential.credential_provider})"])
    if environment.image_pull_credentials_type is not None:
        rows.append(["imagePullCredentialsType", environment.image_pull_credentials_type])
    if environment.docker_server is not None:
        rows.append(["dockerServer", environment.docker_server.compute_type])

    for variable in environment.environment_variables:
        rows.append(["environmentVariable", format_variable(variable)])

    return rows


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)
