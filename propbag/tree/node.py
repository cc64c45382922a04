"""Lightweight tree node used to build XML fragments."""

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Optional

# Characters outside the XML 1.0 Char production, lone surrogates included
_INVALID_XML_CHARS = re.compile("[^\\t\\n\\r\\x20-\\ud7ff\\ue000-\\ufffd\\U00010000-\\U0010ffff]")


def escape_invalid_chars(text: str | None) -> str | None:
    """
    Replace characters XML 1.0 cannot carry with a visible ``\\uXXXX`` escape.

    ElementTree writes such characters through unchanged, which produces
    text no XML parser accepts. A bell character in ``"bell\\x07"`` comes
    out as the six characters ``\\u0007``.
    """
    if text is None:
        return None
    return _INVALID_XML_CHARS.sub(lambda match: f"\\u{ord(match.group()):04x}", text)


@dataclass
class TNode:
    """
    A named node with ordered attributes and child nodes.

    TNode is the tree builder property collections serialize into. It keeps
    its own state so that trees can be compared structurally, and only goes
    through ``xml.etree.ElementTree`` when rendering to or parsing from text.

    Example:
        >>> root = TNode("properties")
        >>> prop = root.add_element("property")
        >>> prop.add_attribute("name", "Category")
        >>> prop.add_attribute("value", "Slow")
        >>> root.outer_xml
        '<properties><property name="Category" value="Slow" /></properties>'
    """

    name: str
    value: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    child_nodes: list["TNode"] = field(default_factory=list)

    def add_element(self, name: str, value: str | None = None) -> "TNode":
        """
        Create a child node, append it and return it.

        Args:
            name: Element name of the child
            value: Optional text content of the child

        Returns:
            The newly created child node
        """
        child = TNode(name, value)
        self.child_nodes.append(child)
        return child

    def add_attribute(self, name: str, value: str) -> None:
        """Set a named attribute on this node."""
        self.attributes[name] = value

    @property
    def first_child(self) -> Optional["TNode"]:
        """First child node, or None if there are no children."""
        return self.child_nodes[0] if self.child_nodes else None

    def select_nodes(self, name: str) -> list["TNode"]:
        """Get all direct children with the given element name."""
        return [child for child in self.child_nodes if child.name == name]

    def select_single_node(self, path: str) -> Optional["TNode"]:
        """
        Find the first node matching a slash separated path of element names.

        Args:
            path: Element names relative to this node, e.g. "properties/property"

        Returns:
            First matching node, or None if nothing matches
        """
        current: TNode | None = self
        for part in path.strip("/").split("/"):
            if current is None:
                return None
            matches = current.select_nodes(part)
            current = matches[0] if matches else None
        return current

    @property
    def outer_xml(self) -> str:
        """Compact XML text for this node and its descendants."""
        return self.to_xml_string()

    def to_xml_string(self, pretty: bool = False) -> str:
        """
        Render this node and its descendants as XML text.

        Characters XML 1.0 does not allow in values and attributes are
        written as ``\\uXXXX`` escapes, so the result always parses.

        Args:
            pretty: Indent nested elements, one element per line

        Returns:
            XML text without a declaration
        """
        element = self._to_element()
        if pretty:
            ET.indent(element)
        return ET.tostring(element, encoding="unicode")

    def _to_element(self) -> ET.Element:
        element = ET.Element(
            self.name,
            {name: escape_invalid_chars(value) for name, value in self.attributes.items()},
        )
        element.text = escape_invalid_chars(self.value)
        for child in self.child_nodes:
            element.append(child._to_element())
        return element

    @classmethod
    def from_xml(cls, xml_text: str) -> "TNode":
        """
        Parse XML text into a TNode tree.

        Whitespace-only text (indentation) is dropped.

        Raises:
            xml.etree.ElementTree.ParseError: If the text is not well-formed XML
        """
        return cls._from_element(ET.fromstring(xml_text))

    @classmethod
    def _from_element(cls, element: ET.Element) -> "TNode":
        text = element.text if element.text and element.text.strip() else None
        node = cls(element.tag, text, dict(element.attrib))
        node.child_nodes = [cls._from_element(child) for child in element]
        return node
