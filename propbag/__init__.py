"""
propbag: multi-valued property collections for test metadata.

propbag keeps the metadata attached to tests (categories, authors,
descriptions, computed attributes) in an ordered, multi-valued PropertyBag
and renders it as a ``<properties>`` XML fragment for reports.

Core Components:
    - PropertyBag: Ordered mapping of key to a list of values
    - PropertyNames: Well-known property keys
    - TNode: Tree node the bag serializes into
    - PropertyDocument: Validated YAML/JSON property document

Example Usage:
    ```python
    from propbag import PropertyBag, PropertyNames

    bag = PropertyBag()
    bag.add(PropertyNames.CATEGORY, "Slow")
    bag.add(PropertyNames.CATEGORY, "Integration")
    bag.set(PropertyNames.AUTHOR, "Jane")

    print(bag.to_xml(recursive=False).outer_xml)
    ```
"""

__version__ = "0.1.0"

# Public API exports - Core functionality
from .common.exceptions import (
    ArgumentNullError,
    ConfigurationError,
    DocumentValidationError,
    LoaderError,
    PropBagError,
)
from .config.settings import DocumentFormat, PropBagConfig
from .core.names import PropertyNames
from .core.property_bag import PropertyBag
from .loaders import load_document, load_property_bag
from .models.document import PropertyDocument
from .tree.node import TNode

__all__ = [
    # Core functionality
    "PropertyBag",
    "PropertyNames",
    "TNode",
    "__version__",
    # Documents and configuration
    "PropertyDocument",
    "PropBagConfig",
    "DocumentFormat",
    "load_document",
    "load_property_bag",
    # Errors
    "PropBagError",
    "ArgumentNullError",
    "ConfigurationError",
    "LoaderError",
    "DocumentValidationError",
]
