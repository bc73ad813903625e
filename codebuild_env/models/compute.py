"""Compute value objects: attribute-based compute and reserved fleets."""

from typing import Optional

from pydantic import Field, StrictInt, field_validator

from ..core.validation import validate_enum
from .base import ValueObject, enum_value
from .enums import MachineType


class ComputeConfiguration(ValueObject):
    """Resources requested when the compute type is attribute based."""

    v_cpu: Optional[StrictInt] = Field(None, alias="vCpu", description="Number of vCPUs")
    memory: Optional[StrictInt] = Field(None, alias="memory", description="Memory in GiB")
    disk: Optional[StrictInt] = Field(None, alias="disk", description="Disk space in GiB")
    machine_type: Optional[str] = Field(None, alias="machineType", description="Machine family")
    instance_type: Optional[str] = Field(None, alias="instanceType", description="EC2 instance type")

    normalize_machine_type = field_validator("machine_type", mode="before")(enum_value)

    def request_body(self) -> dict:
        payload = {}
        if self.v_cpu is not None:
            payload["vCpu"] = self.v_cpu
        if self.memory is not None:
            payload["memory"] = self.memory
        if self.disk is not None:
            payload["disk"] = self.disk
        if self.machine_type is not None:
            payload["machineType"] = validate_enum(
                self.machine_type, MachineType, "machineType", type(self).__name__
            )
        if self.instance_type is not None:
            payload["instanceType"] = self.instance_type
        return payload


class ProjectFleet(ValueObject):
    """Reserved capacity fleet a project builds on."""

    fleet_arn: Optional[str] = Field(None, alias="fleetArn", description="ARN of the compute fleet")

    def request_body(self) -> dict:
        payload = {}
        if self.fleet_arn is not None:
            payload["fleetArn"] = self.fleet_arn
        return payload
