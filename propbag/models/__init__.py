"""Data models for property documents."""

from propbag.models.document import PropertyDocument, PropertyValue, Scalar

__all__ = [
    "PropertyDocument",
    "PropertyValue",
    "Scalar",
]
