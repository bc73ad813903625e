"""Private registry credentials."""

from typing import ClassVar, Tuple

from pydantic import Field, field_validator

from ..core.validation import validate_enum
from .base import ValueObject, enum_value
from .enums import CredentialProviderType


class RegistryCredential(ValueObject):
    """Credentials for pulling the build image from a private registry.

    ``credential`` is the ARN or name of the secret holding the registry
    login; ``credential_provider`` names the service that stores it.
    """

    required_fields: ClassVar[Tuple[str, ...]] = ("credential", "credential_provider")

    credential: str = Field(..., alias="credential", description="ARN or name of the stored credential")
    credential_provider: str = Field(..., alias="credentialProvider", description="Service storing the credential")

    normalize_provider = field_validator("credential_provider", mode="before")(enum_value)

    def request_body(self) -> dict:
        return {
            "credential": self.credential,
            "credentialProvider": validate_enum(
                self.credential_provider, CredentialProviderType, "credentialProvider", type(self).__name__
            ),
        }
