import pytest
from click.testing import CliRunner
import tempfile
from pathlib import Path


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def temp_project_dir():
    """Creates a temporary project directory with a data directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        project_path = Path(tmpdir)
        (project_path / ".codebuild-env").mkdir()
        yield project_path


@pytest.fixture
def minimal_environment():
    """The smallest valid environment mapping."""
    return {
        "type": "LINUX_CONTAINER",
        "image": "aws/codebuild/standard:4.0",
        "computeType": "BUILD_GENERAL1_SMALL",
    }


@pytest.fixture
def full_environment(minimal_environment):
    """An environment mapping with every field set."""
    return {
        **minimal_environment,
        "computeConfiguration": {
            "vCpu": 4,
            "memory": 16,
            "disk": 100,
            "machineType": "GENERAL",
            "instanceType": "m5.xlarge",
        },
        "fleet": {"fleetArn": "arn:aws:codebuild:us-east-1:123456789012:fleet/build-fleet:1"},
        "environmentVariables": [
            {"name": "STAGE", "value": "prod"},
            {"name": "DB_PASSWORD", "value": "/prod/db/password", "type": "PARAMETER_STORE"},
            {"name": "API_TOKEN", "value": "prod/api-token", "type": "SECRETS_MANAGER"},
        ],
        "privilegedMode": True,
        "certificate": "arn:aws:s3:::build-certs/ca-bundle.pem",
        "registryCredential": {
            "credential": "arn:aws:secretsmanager:us-east-1:123456789012:secret:registry",
            "credentialProvider": "SECRETS_MANAGER",
        },
        "imagePullCredentialsType": "SERVICE_ROLE",
        "dockerServer": {
            "computeType": "BUILD_GENERAL1_MEDIUM",
            "securityGroupIds": ["sg-0123", "sg-4567"],
        },
    }


@pytest.fixture
def isolated_cli_runner(cli_runner):
    """Provides a CLI runner with isolated filesystem."""
    with cli_runner.isolated_filesystem():
        yield cli_runner
