"""Core property collection types."""

from propbag.core.names import PropertyNames
from propbag.core.property_bag import PropertyBag

__all__ = [
    "PropertyBag",
    "PropertyNames",
]
