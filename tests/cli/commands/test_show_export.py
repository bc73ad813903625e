"""Tests for the show and export commands."""

import json
from pathlib import Path

from codebuild_env.cli.main import cli


def store(environment):
    data_dir = Path.cwd() / ".codebuild-env"
    data_dir.mkdir(exist_ok=True)
    (data_dir / "environment.json").write_text(json.dumps(environment))


class TestShowCommand:
    """Test the show command."""

    def test_show_nothing_configured(self, isolated_cli_runner):
        result = isolated_cli_runner.invoke(cli, ['show'])
        assert result.exit_code == 0
        assert "No build environment configured" in result.output

    def test_show_json(self, isolated_cli_runner, full_environment):
        store(full_environment)
        result = isolated_cli_runner.invoke(cli, ['show', '--format', 'json'])

        assert result.exit_code == 0
        assert json.loads(result.output) == full_environment

    def test_show_table(self, isolated_cli_runner, minimal_environment):
        store(minimal_environment)
        result = isolated_cli_runner.invoke(cli, ['show'])

        assert result.exit_code == 0
        assert "LINUX_CONTAINER" in result.output

    def test_show_corrupted(self, isolated_cli_runner):
        Path(".codebuild-env").mkdir()
        Path(".codebuild-env/environment.json").write_text("{")
        result = isolated_cli_runner.invoke(cli, ['show'])
        assert result.exit_code == 1


class TestExportCommand:
    """Test the export command."""

    def test_export_stdout(self, isolated_cli_runner, full_environment):
        store(full_environment)
        result = isolated_cli_runner.invoke(cli, ['export'])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == full_environment

    def test_export_to_file(self, isolated_cli_runner, minimal_environment):
        store(minimal_environment)
        result = isolated_cli_runner.invoke(cli, ['export', '--output', 'request.json'])

        assert result.exit_code == 0
        assert json.loads(Path("request.json").read_text()) == minimal_environment

    def test_export_unknown_enum(self, isolated_cli_runner, minimal_environment):
        store({**minimal_environment, "imagePullCredentialsType": "FEDERATED"})
        result = isolated_cli_runner.invoke(cli, ['export'])
        assert result.exit_code == 1

    def test_export_without_environment(self, isolated_cli_runner):
        result = isolated_cli_runner.invoke(cli, ['export'])
        assert result.exit_code == 1
