"""External Docker server used for image builds."""

from typing import ClassVar, Optional, Tuple

from pydantic import Field, field_validator

from ..core.validation import validate_enum
from .base import ValueObject, empty_when_absent, enum_value
from .enums import ComputeType


class DockerServerStatus(ValueObject):
    """Status reported by the service for a Docker server."""

    status: Optional[str] = Field(None, alias="status")
    message: Optional[str] = Field(None, alias="message")

    def request_body(self) -> dict:
        payload = {}
        if self.status is not None:
            payload["status"] = self.status
        if self.message is not None:
            payload["message"] = self.message
        return payload


class DockerServer(ValueObject):
    """Docker server that runs image builds outside the build container."""

    required_fields: ClassVar[Tuple[str, ...]] = ("compute_type",)

    compute_type: str = Field(..., alias="computeType", description="Compute tier of the Docker server")
    security_group_ids: Tuple[str, ...] = Field((), alias="securityGroupIds")
    status: Optional[DockerServerStatus] = Field(None, alias="status")

    normalize_compute_type = field_validator("compute_type", mode="before")(enum_value)
    normalize_security_group_ids = field_validator("security_group_ids", mode="before")(empty_when_absent)

    def request_body(self) -> dict:
        payload = {
            "computeType": validate_enum(self.compute_type, ComputeType, "computeType", type(self).__name__),
        }
        if "security_group_ids" in self.model_fields_set:
            payload["securityGroupIds"] = list(self.security_group_ids)
        if self.status is not None:
            payload["status"] = self.status.request_body()
        return payload
