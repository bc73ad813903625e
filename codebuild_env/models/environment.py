"""Build environment of a build project."""

from typing import ClassVar, List, Optional, Tuple

from pydantic import Field, StrictBool, field_validator

from ..core.constants import ATTRIBUTE_BASED_COMPUTE
from ..core.validation import validate_enum
from .base import ValueObject, empty_when_absent, enum_value
from .compute import ComputeConfiguration, ProjectFleet
from .credentials import RegistryCredential
from .docker import DockerServer
from .enums import ComputeType, EnvironmentType, EnvironmentVariableType, ImagePullCredentialsType


class EnvironmentVariable(ValueObject):
    """A name/value pair made available to builds."""

    required_fields: ClassVar[Tuple[str, ...]] = ("name", "value")

    name: str = Field(..., alias="name")
    value: str = Field(..., alias="value")
    type: Optional[str] = Field(None, alias="type", description="PLAINTEXT, PARAMETER_STORE or SECRETS_MANAGER")

    normalize_type = field_validator("type", mode="before")(enum_value)

    def request_body(self) -> dict:
        payload = {"name": self.name, "value": self.value}
        if self.type is not None:
            payload["type"] = validate_enum(self.type, EnvironmentVariableType, "type", type(self).__name__)
        return payload


class ProjectEnvironment(ValueObject):
    """Information about the build environment of a build project.

    ``type``, ``image`` and ``compute_type`` are required; everything else is
    optional. Nested values may be passed as instances or as raw mappings and
    are validated eagerly. Enum-valued fields keep whatever tag they are given.

    ``privileged_mode`` stays ``None`` when not given, which is different from
    an explicit ``False``: only the latter is sent in a request body.
    """

    required_fields: ClassVar[Tuple[str, ...]] = ("type", "image", "compute_type")

    type: str = Field(..., alias="type", description="Build environment type")
    image: str = Field(..., alias="image", description="Image tag or digest")
    compute_type: str = Field(..., alias="computeType", description="Compute tier")
    compute_configuration: Optional[ComputeConfiguration] = Field(None, alias="computeConfiguration")
    fleet: Optional[ProjectFleet] = Field(None, alias="fleet")
    environment_variables: Tuple[EnvironmentVariable, ...] = Field((), alias="environmentVariables")
    privileged_mode: Optional[StrictBool] = Field(None, alias="privilegedMode")
    certificate: Optional[str] = Field(None, alias="certificate", description="S3 location of a PEM certificate")
    registry_credential: Optional[RegistryCredential] = Field(None, alias="registryCredential")
    image_pull_credentials_type: Optional[str] = Field(None, alias="imagePullCredentialsType")
    docker_server: Optional[DockerServer] = Field(None, alias="dockerServer")

    normalize_enums = field_validator(
        "type", "compute_type", "image_pull_credentials_type", mode="before"
    )(enum_value)
    normalize_environment_variables = field_validator(
        "environment_variables", mode="before"
    )(empty_when_absent)

    def compute_configuration_issues(self) -> List[str]:
        """Report cross-field rules the service enforces but construction does not."""
        issues = []
        if self.compute_type == ATTRIBUTE_BASED_COMPUTE and self.compute_configuration is None:
            issues.append(
                f'computeConfiguration is required when computeType is "{ATTRIBUTE_BASED_COMPUTE}".'
            )
        return issues

    def get_environment_variable(self, name: str) -> Optional[EnvironmentVariable]:
        for variable in self.environment_variables:
            if variable.name == name:
                return variable
        return None

    def request_body(self) -> dict:
        model = type(self).__name__
        payload = {
            "type": validate_enum(self.type, EnvironmentType, "type", model),
            "image": self.image,
            "computeType": validate_enum(self.compute_type, ComputeType, "computeType", model),
        }
        if self.compute_configuration is not None:
            payload["computeConfiguration"] = self.compute_configuration.request_body()
        if self.fleet is not None:
            payload["fleet"] = self.fleet.request_body()
        if "environment_variables" in self.model_fields_set:
            payload["environmentVariables"] = [v.request_body() for v in self.environment_variables]
        if self.privileged_mode is not None:
            payload["privilegedMode"] = self.privileged_mode
        if self.certificate is not None:
            payload["certificate"] = self.certificate
        if self.registry_credential is not None:
            payload["registryCredential"] = self.registry_credential.request_body()
        if self.image_pull_credentials_type is not None:
            payload["imagePullCredentialsType"] = validate_enum(
                self.image_pull_credentials_type, ImagePullCredentialsType, "imagePullCredentialsType", model
            )
        if self.docker_server is not None:
            payload["dockerServer"] = self.docker_server.request_body()
        return payload
