"""Common utilities and shared components for propbag.

This package contains the exceptions, guards and interfaces used
throughout propbag.
"""

from .exceptions import (
    ArgumentNullError,
    ConfigurationError,
    DocumentValidationError,
    LoaderError,
    PropBagError,
)
from .guard import argument_not_null
from .interfaces import PropertyBagInterface, XmlNodeBuilder

__all__ = [
    # Exceptions
    "PropBagError",
    "ArgumentNullError",
    "ConfigurationError",
    "LoaderError",
    "DocumentValidationError",

    # Guards
    "argument_not_null",

    # Interfaces
    "XmlNodeBuilder",
    "PropertyBagInterface",
]
