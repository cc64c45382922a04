"""Common interfaces and abstract base classes for propbag.

This module defines the contracts between the property bag, its owners and
the tree builder it serializes into.
"""

from abc import ABC, abstractmethod
from collections.abc import KeysView
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from propbag.tree.node import TNode


class XmlNodeBuilder(ABC):
    """Abstract interface for objects that render themselves as a node tree."""

    @abstractmethod
    def to_xml(self, recursive: bool) -> "TNode":
        """Build a node representing this object under a fresh root."""
        pass

    @abstractmethod
    def add_to_xml(self, parent_node: "TNode", recursive: bool) -> "TNode":
        """Add a node representing this object under parent_node and return it."""
        pass


class PropertyBagInterface(XmlNodeBuilder):
    """Abstract interface for multi-valued property collections."""

    @abstractmethod
    def add(self, key: str, value: Any) -> None:
        """Append a value to the list kept for key."""
        pass

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Replace every value kept for key with a single value."""
        pass

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Get the first value kept for key, or None."""
        pass

    @abstractmethod
    def contains_key(self, key: str) -> bool:
        """Check whether key has an entry."""
        pass

    @property
    @abstractmethod
    def keys(self) -> KeysView[str]:
        """Get a read-only view of the keys."""
        pass

    @abstractmethod
    def __getitem__(self, key: str) -> list[Any]:
        """Get the live list of values for key."""
        pass

    @abstractmethod
    def __setitem__(self, key: str, values: list[Any]) -> None:
        """Replace the list of values for key."""
        pass
