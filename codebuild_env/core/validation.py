"""Required-field checks for raw input mappings."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .exceptions import InvalidArgument, MissingRequiredField


@dataclass(frozen=True)
class FieldCheck:
    """Outcome of looking up one required field."""

    field: str
    value: Any = None
    error: Optional[MissingRequiredField] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def validate_required(
    data: Mapping[str, Any],
    field: str,
    attribute: Optional[str] = None,
    model: Optional[str] = None,
) -> FieldCheck:
    """Look up a required field by wire name, falling back to its attribute name.

    A key that is present but holds ``None`` counts as missing.

    Args:
        data: Raw input mapping
        field: Wire (camelCase) name of the field
        attribute: Python attribute name, tried when the wire name is absent
        model: Name of the value object being built, used in the error

    Returns:
        A FieldCheck holding either the value or a MissingRequiredField error
    """
    value = data.get(field)
    if value is None and attribute and attribute != field:
        value = data.get(attribute)
    if value is None:
        return FieldCheck(field=field, error=MissingRequiredField(field, model))
    return FieldCheck(field=field, value=value)


def validate_enum(value: Any, enum_cls, field: str, model: str) -> str:
    """Check a tag against its enumeration before it goes on the wire.

    Raises:
        InvalidArgument: If the tag is not a member of ``enum_cls``
    """
    if not enum_cls.exists(value):
        raise InvalidArgument(
            f'Invalid parameter "{field}" for "{model}". '
            f'The value "{value}" is not a valid "{enum_cls.__name__}".'
        )
    return value
