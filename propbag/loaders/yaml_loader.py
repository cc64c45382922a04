"""YAML property document loader for propbag."""

import logging
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from propbag.common.exceptions import LoaderError
from propbag.config.settings import PropBagConfig
from propbag.core.property_bag import PropertyBag
from propbag.models.document import PropertyDocument

logger = logging.getLogger(__name__)


class YamlLoader:
    """
    YAML loader for property documents.

    Loads and parses YAML files containing a ``properties`` mapping,
    converting them into PropertyBag instances.
    """

    loader_type = "yaml"

    def __init__(self, config: PropBagConfig | None = None):
        """Initialize YAML loader with ruamel configuration."""
        self.config = config or PropBagConfig()
        self.yaml = YAML(typ="safe")
        self.yaml.default_flow_style = False

    def load_document(self, file_path: str | Path) -> PropertyDocument:
        """
        Load a property document from a YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            Validated PropertyDocument

        Raises:
            FileNotFoundError: If file doesn't exist
            LoaderError: If the file is not valid YAML
            DocumentValidationError: If the document shape is invalid
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Property file not found: {file_path}")

        with open(path, encoding="utf-8") as f:
            data = self._parse(f, str(path))

        logger.debug("Loaded YAML property document %s", path)
        return PropertyDocument.parse(data, file_path=str(path))

    def load_document_from_string(self, yaml_content: str) -> PropertyDocument:
        """Load a property document from YAML content."""
        return PropertyDocument.parse(self._parse(yaml_content, None))

    def load(self, file_path: str | Path) -> PropertyBag:
        """Load a YAML file straight into a PropertyBag."""
        return self.load_document(file_path).to_property_bag(
            self.config.drop_nulls, file_path=str(file_path)
        )

    def load_from_string(self, yaml_content: str) -> PropertyBag:
        """Load YAML content straight into a PropertyBag."""
        return self.load_document_from_string(yaml_content).to_property_bag(self.config.drop_nulls)

    def _parse(self, stream: Any, file_path: str | None) -> Any:
        try:
            return self.yaml.load(stream)
        except YAMLError as e:
            raise LoaderError(
                f"Invalid YAML: {e}", file_path=file_path, loader_type=self.loader_type
            ) from e
