"""Tree building support for serialized property output."""

from propbag.tree.node import TNode, escape_invalid_chars

__all__ = [
    "TNode",
    "escape_invalid_chars",
]
