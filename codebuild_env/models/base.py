"""Base class shared by every value object."""

from enum import Enum
from typing import Any, ClassVar, Mapping, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from ..core.exceptions import InvalidArgument
from ..core.validation import validate_required


def enum_value(value: Any) -> Any:
    """Store enum members as their raw tag."""
    if isinstance(value, Enum):
        return value.value
    return value


def empty_when_absent(value: Any) -> Any:
    """Read an absent sequence as an empty one."""
    return () if value is None else value


class ValueObject(BaseModel):
    """Immutable, validated value object.

    Input uses the wire (camelCase) field names; attribute names are accepted
    as well. Unknown keys are dropped. Fields listed in ``required_fields``
    are checked before any other validation runs, so a missing one aborts
    construction with ``MissingRequiredField`` rather than a partial object.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    required_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def check_required_fields(cls, data: Any) -> Any:
        if isinstance(data, cls):
            return data
        if not isinstance(data, Mapping):
            raise InvalidArgument(
                f"{cls.__name__} expects a mapping or a {cls.__name__} instance, "
                f"got {type(data).__name__}."
            )
        data = dict(data)
        for name in cls.required_fields:
            wire = cls.wire_name(name)
            check = validate_required(data, wire, name, cls.__name__)
            if not check.ok:
                raise check.error
            # Aliases win over attribute names, so a null wire key must not shadow the value
            data[wire] = check.value
        return data

    @classmethod
    def wire_name(cls, attribute: str) -> str:
        return cls.model_fields[attribute].alias or attribute

    @classmethod
    def create(cls, value: Any):
        """Return ``value`` if it already is an instance, otherwise build one from it."""
        if isinstance(value, cls):
            return value
        return cls.model_validate(value)

    def to_dict(self) -> dict:
        """Convert to a dictionary keyed by wire names, leaving out unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude_unset=True)
