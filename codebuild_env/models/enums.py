"""Enumerations for enum-valued fields.

Value objects store these tags as plain strings so that tags added by the
service later still construct; the closed sets below are only consulted when
a request body is built.
"""

from enum import Enum


class OpenEnum(str, Enum):
    """String enumeration with a membership check on raw tags."""

    @classmethod
    def exists(cls, value) -> bool:
        if isinstance(value, Enum):
            value = value.value
        return any(member.value == value for member in cls)


class EnvironmentType(OpenEnum):
    """Build environment types."""
    ARM_CONTAINER = "ARM_CONTAINER"
    ARM_EC2 = "ARM_EC2"
    ARM_LAMBDA_CONTAINER = "ARM_LAMBDA_CONTAINER"
    LINUX_CONTAINER = "LINUX_CONTAINER"
    LINUX_EC2 = "LINUX_EC2"
    LINUX_GPU_CONTAINER = "LINUX_GPU_CONTAINER"
    LINUX_LAMBDA_CONTAINER = "LINUX_LAMBDA_CONTAINER"
    MAC_ARM = "MAC_ARM"
    WINDOWS_CONTAINER = "WINDOWS_CONTAINER"
    WINDOWS_EC2 = "WINDOWS_EC2"
    WINDOWS_SERVER_2019_CONTAINER = "WINDOWS_SERVER_2019_CONTAINER"
    WINDOWS_SERVER_2022_CONTAINER = "WINDOWS_SERVER_2022_CONTAINER"


class ComputeType(OpenEnum):
    """Compute tiers available to builds."""
    ATTRIBUTE_BASED_COMPUTE = "ATTRIBUTE_BASED_COMPUTE"
    BUILD_GENERAL1_2XLARGE = "BUILD_GENERAL1_2XLARGE"
    BUILD_GENERAL1_LARGE = "BUILD_GENERAL1_LARGE"
    BUILD_GENERAL1_MEDIUM = "BUILD_GENERAL1_MEDIUM"
    BUILD_GENERAL1_SMALL = "BUILD_GENERAL1_SMALL"
    BUILD_GENERAL1_XLARGE = "BUILD_GENERAL1_XLARGE"
    BUILD_LAMBDA_10GB = "BUILD_LAMBDA_10GB"
    BUILD_LAMBDA_1GB = "BUILD_LAMBDA_1GB"
    BUILD_LAMBDA_2GB = "BUILD_LAMBDA_2GB"
    BUILD_LAMBDA_4GB = "BUILD_LAMBDA_4GB"
    BUILD_LAMBDA_8GB = "BUILD_LAMBDA_8GB"
    CUSTOM_INSTANCE_TYPE = "CUSTOM_INSTANCE_TYPE"


class ImagePullCredentialsType(OpenEnum):
    """Credentials used to pull the build image."""
    CODEBUILD = "CODEBUILD"
    SERVICE_ROLE = "SERVICE_ROLE"


class EnvironmentVariableType(OpenEnum):
    """Where an environment variable's value comes from."""
    PARAMETER_STORE = "PARAMETER_STORE"
    PLAINTEXT = "PLAINTEXT"
    SECRETS_MANAGER = "SECRETS_MANAGER"


class CredentialProviderType(OpenEnum):
    """Services that can hold private registry credentials."""
    SECRETS_MANAGER = "SECRETS_MANAGER"


class MachineType(OpenEnum):
    """Machine families for attribute-based compute."""
    GENERAL = "GENERAL"
    NVME = "NVME"
