"""Value objects for codebuild-env."""

from .base import ValueObject
from .compute import ComputeConfiguration, ProjectFleet
from .credentials import RegistryCredential
from .docker import DockerServer, DockerServerStatus
from .environment import EnvironmentVariable, ProjectEnvironment
from .enums import (
    ComputeType,
    CredentialProviderType,
    EnvironmentType,
    EnvironmentVariableType,
    ImagePullCredentialsType,
    MachineType,
)

__all__ = [
    'ValueObject',
    'ComputeConfiguration',
    'ProjectFleet',
    'RegistryCredential',
    'DockerServer',
    'DockerServerStatus',
    'EnvironmentVariable',
    'ProjectEnvironment',
    'ComputeType',
    'CredentialProviderType',
    'EnvironmentType',
    'EnvironmentVariableType',
    'ImagePullCredentialsType',
    'MachineType',
]
