"""
Property document loading for propbag.

This module provides loaders for YAML and JSON property documents and a
format-dispatching ``load_property_bag`` helper.
"""

import logging
from pathlib import Path

from propbag.config.constants import SUPPORTED_EXTENSIONS
from propbag.config.settings import DocumentFormat, PropBagConfig
from propbag.core.property_bag import PropertyBag
from propbag.loaders.json_loader import JsonLoader
from propbag.loaders.yaml_loader import YamlLoader
from propbag.models.document import PropertyDocument

logger = logging.getLogger(__name__)


def get_loader(
    file_path: str | Path,
    fmt: DocumentFormat | None = None,
    config: PropBagConfig | None = None,
) -> YamlLoader | JsonLoader:
    """
    Pick the loader for file_path.

    Args:
        file_path: Property document path
        fmt: Explicit format, overrides the configured default
        config: Configuration, defaults to PROPBAG_* environment settings
    """
    config = config or PropBagConfig.from_env()
    path = Path(file_path)
    resolved = config.resolve_format(path, fmt)

    extension = path.suffix.lstrip(".").lower()
    if (fmt or config.default_format) == DocumentFormat.AUTO and extension not in SUPPORTED_EXTENSIONS:
        logger.warning("Unknown extension %r for %s, reading as YAML", extension, path)

    if resolved == DocumentFormat.JSON:
        return JsonLoader(config)
    return YamlLoader(config)


def load_document(
    file_path: str | Path,
    fmt: DocumentFormat | None = None,
    config: PropBagConfig | None = None,
) -> PropertyDocument:
    """Load and validate a property document without building a bag."""
    return get_loader(file_path, fmt, config).load_document(file_path)


def load_property_bag(
    file_path: str | Path,
    fmt: DocumentFormat | None = None,
    config: PropBagConfig | None = None,
) -> PropertyBag:
    """
    Load a property document into a PropertyBag.

    Raises:
        FileNotFoundError: If file doesn't exist
        LoaderError: If the file cannot be parsed
        DocumentValidationError: If the document shape is invalid
    """
    return get_loader(file_path, fmt, config).load(file_path)


__all__ = [
    "YamlLoader",
    "JsonLoader",
    "get_loader",
    "load_document",
    "load_property_bag",
]
