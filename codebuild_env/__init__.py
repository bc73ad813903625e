"""codebuild-env - Validated build environment value objects for a build-service client."""

__version__ = "0.1.0"

from .core.exceptions import InvalidArgument, MissingRequiredField
from .models import (
    ComputeConfiguration,
    DockerServer,
    EnvironmentVariable,
    ProjectEnvironment,
    ProjectFleet,
    RegistryCredential,
)

__all__ = [
    'InvalidArgument',
    'MissingRequiredField',
    'ComputeConfiguration',
    'DockerServer',
    'EnvironmentVariable',
    'ProjectEnvironment',
    'ProjectFleet',
    'RegistryCredential',
]
