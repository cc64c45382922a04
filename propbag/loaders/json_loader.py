"""JSON property document loader for propbag."""

import json
import logging
from pathlib import Path

from propbag.common.exceptions import LoaderError
from propbag.config.settings import PropBagConfig
from propbag.core.property_bag import PropertyBag
from propbag.models.document import PropertyDocument

logger = logging.getLogger(__name__)


class JsonLoader:
    """
    JSON loader for property documents.

    Shares the document model with the YAML loader so both formats
    produce identical bags.
    """

    loader_type = "json"

    def __init__(self, config: PropBagConfig | None = None):
        """Initialize JSON loader."""
        self.config = config or PropBagConfig()

    def load_document(self, file_path: str | Path) -> PropertyDocument:
        """
        Load a property document from a JSON file.

        Raises:
            FileNotFoundError: If file doesn't exist
            LoaderError: If the file is not valid JSON
            DocumentValidationError: If the document shape is invalid
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"Property file not found: {file_path}")

        with open(path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise LoaderError(
                    f"Invalid JSON: {e}", file_path=str(path), loader_type=self.loader_type
                ) from e

        logger.debug("Loaded JSON property document %s", path)
        return PropertyDocument.parse(data, file_path=str(path))

    def load_document_from_string(self, json_content: str) -> PropertyDocument:
        """Load a property document from JSON content."""
        try:
            data = json.loads(json_content)
        except json.JSONDecodeError as e:
            raise LoaderError(f"Invalid JSON: {e}", loader_type=self.loader_type) from e
        return PropertyDocument.parse(data)

    def load(self, file_path: str | Path) -> PropertyBag:
        """Load a JSON file straight into a PropertyBag."""
        return self.load_document(file_path).to_property_bag(
            self.config.drop_nulls, file_path=str(file_path)
        )

    def load_from_string(self, json_content: str) -> PropertyBag:
        """Load JSON content straight into a PropertyBag."""
        return self.load_document_from_string(json_content).to_property_bag(self.config.drop_nulls)
