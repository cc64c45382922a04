"""PropertyBag implementation for propbag."""

import logging
from collections.abc import ItemsView, Iterator, KeysView, Mapping
from typing import Any

from propbag.common.guard import argument_not_null
from propbag.common.interfaces import PropertyBagInterface
from propbag.tree.node import TNode

logger = logging.getLogger(__name__)

ROOT_NODE_NAME = "dummy"
PROPERTIES_ELEMENT = "properties"
PROPERTY_ELEMENT = "property"


class PropertyBag(PropertyBagInterface):
    """
    A collection of name/value pairs that allows several values per key.

    Keys are strings and values may be of any type except None, since a
    missing key is how the absence of a value is represented. ``add`` appends
    a value to a key while ``set`` makes it the key's only value.

    Reading ``bag[key]`` for a key that is not present inserts an empty list
    for it and returns that list, so the key is present afterwards. ``get``
    never inserts anything and returns None for unknown keys instead.

    Example:
        >>> bag = PropertyBag()
        >>> bag.add("Category", "Slow")
        >>> bag.add("Category", "Integration")
        >>> bag.set("Author", "Jane")
        >>> bag["Category"]
        ['Slow', 'Integration']
        >>> bag.get("Author")
        'Jane'
    """

    def __init__(self):
        self._inner: dict[str, list[Any]] = {}

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "PropertyBag":
        """
        Build a bag from a mapping of key to a value or a list of values.

        Every value goes through ``add``, so None values are rejected.

        Args:
            mapping: Keys mapped to a single value or a list/tuple of values

        Returns:
            New PropertyBag with the keys in the mapping's order

        Raises:
            ArgumentNullError: If any value is None
        """
        bag = cls()
        for key, value in mapping.items():
            values = value if isinstance(value, (list, tuple)) else [value]
            for item in values:
                bag.add(key, item)
        return bag

    def add(self, key: str, value: Any) -> None:
        """
        Add a key/value pair, keeping any values already present for key.

        Args:
            key: The key
            value: The value, must not be None

        Raises:
            ArgumentNullError: If value is None
        """
        argument_not_null(value, "value")

        values = self._inner.get(key)
        if values is None:
            logger.debug("Creating property %r", key)
            values = []
            self._inner[key] = values
        values.append(value)

    def set(self, key: str, value: Any) -> None:
        """
        Set the value for a key, removing any other values it had.

        Raises:
            ArgumentNullError: If key or value is None
        """
        argument_not_null(key, "key")
        argument_not_null(value, "value")

        if key in self._inner:
            logger.debug("Replacing %d value(s) of property %r", len(self._inner[key]), key)
        self._inner[key] = [value]

    def get(self, key: str) -> Any | None:
        """
        Get a single value for a key.

        Returns:
            The first value if several are present, None if the key is
            missing or has no values
        """
        values = self._inner.get(key)
        return values[0] if values else None

    def contains_key(self, key: str) -> bool:
        """Check whether key has an entry, even an empty one."""
        return key in self._inner

    @property
    def keys(self) -> KeysView[str]:
        """Read-only view of all keys, in the order they were first added."""
        return self._inner.keys()

    def items(self) -> ItemsView[str, list[Any]]:
        """Key/value-list pairs in key order."""
        return self._inner.items()

    def to_dict(self) -> dict[str, list[Any]]:
        """Copy of the bag as a plain dict of key to list of values."""
        return {key: list(values) for key, values in self._inner.items()}

    def __getitem__(self, key: str) -> list[Any]:
        values = self._inner.get(key)
        if values is None:
            values = []
            self._inner[key] = values
        return values

    def __setitem__(self, key: str, values: list[Any]) -> None:
        self._inner[key] = values

    def __contains__(self, key: object) -> bool:
        return key in self._inner

    def __iter__(self) -> Iterator[str]:
        return iter(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __repr__(self) -> str:
        return f"PropertyBag({len(self._inner)} keys)"

    # ------------------------------------------------------------------
    # XML serialization
    # ------------------------------------------------------------------

    def to_xml(self, recursive: bool) -> TNode:
        """
        Build a node representing this bag.

        Args:
            recursive: Not used, properties never nest

        Returns:
            The ``properties`` node, attached to a fresh root node
        """
        return self.add_to_xml(TNode(ROOT_NODE_NAME), recursive)

    def add_to_xml(self, parent_node: TNode, recursive: bool) -> TNode:
        """
        Add a ``properties`` node for this bag under parent_node.

        Each value becomes one ``property`` element carrying ``name`` and
        ``value`` attributes, keys in key order and values in the order they
        were added.

        Args:
            parent_node: Node to attach the ``properties`` element to
            recursive: Not used

        Returns:
            The ``properties`` node
        """
        properties = parent_node.add_element(PROPERTIES_ELEMENT)

        for key in self.keys:
            for value in self._inner[key]:
                prop = properties.add_element(PROPERTY_ELEMENT)

                # TODO: type-aware formatting for dates and floats instead of str()
                prop.add_attribute("name", key)
                prop.add_attribute("value", str(value))

        return properties
