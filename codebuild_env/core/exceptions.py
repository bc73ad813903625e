"""Custom exceptions for codebuild-env.

None of these derive from ``ValueError``, so pydantic lets them escape from
model validators untouched instead of folding them into a ``ValidationError``.
"""

from typing import Optional


class CodeBuildEnvError(Exception):
    """Base exception for all codebuild-env errors."""

    pass


class InvalidArgument(CodeBuildEnvError):
    """Exception raised for input that cannot be turned into a value object."""

    pass


class MissingRequiredField(InvalidArgument):
    """Exception raised when a required field is absent or explicitly null."""

    def __init__(self, field: str, model: Optional[str] = None):
        self.field = field
        self.model = model
        message = f'Missing required field "{field}".'
        if model:
            message = f"{model}: {message}"
        super().__init__(message)


class ConfigurationError(CodeBuildEnvError):
    """Exception raised for configuration store operations."""

    pass
