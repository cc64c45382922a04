"""Common exceptions for propbag.

This module defines the exception types used throughout propbag to provide
consistent error handling and clear error semantics.
"""

from typing import Any


class PropBagError(Exception):
    """Base exception for all propbag-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.context = context or {}


class ArgumentNullError(PropBagError):
    """Raised when an argument that must carry a value is None."""

    def __init__(self, param_name: str, context: dict[str, Any] | None = None):
        """Initialize with the name of the offending parameter."""
        super().__init__(f"Value cannot be None. (Parameter '{param_name}')", context)
        self.param_name = param_name


class ConfigurationError(PropBagError):
    """Raised when configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize configuration error with details."""
        super().__init__(message, context)
        self.config_key = config_key


class LoaderError(PropBagError):
    """Raised when a property document cannot be read or parsed."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        loader_type: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize loader error with details."""
        super().__init__(message, context)
        self.file_path = file_path
        self.loader_type = loader_type


class DocumentValidationError(LoaderError):
    """Raised when a property document does not have the expected shape."""

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        file_path: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize document validation error with the individual errors."""
        super().__init__(message, file_path, None, context)
        self.errors = errors or []


__all__ = [
    'PropBagError',
    'ArgumentNullError',
    'ConfigurationError',
    'LoaderError',
    'DocumentValidationError',
]
