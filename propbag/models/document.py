"""
Property document models.

A property document is a YAML or JSON object carrying a ``properties``
mapping. Each key maps to a single scalar or to a list of scalars:

    name: checkout-tests
    properties:
      Category: [Slow, Integration]
      Author: Jane
      MaxTime: 2000
"""

import logging
from datetime import date, datetime
from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from propbag.common.exceptions import DocumentValidationError
from propbag.core.property_bag import PropertyBag

logger = logging.getLogger(__name__)

Scalar = Union[str, int, float, bool, datetime, date]
PropertyValue = Union[Scalar, None, list[Union[Scalar, None]]]


class PropertyDocument(BaseModel):
    """Validated contents of a property document."""

    model_config = ConfigDict(extra="forbid")

    name: str | None = None
    description: str | None = None
    properties: dict[str, PropertyValue] = Field(default_factory=dict)

    @classmethod
    def parse(cls, data: Any, file_path: str | None = None) -> "PropertyDocument":
        """
        Validate raw loader output into a document.

        Args:
            data: Object produced by the YAML or JSON parser
            file_path: Source path, used in error reporting

        Raises:
            DocumentValidationError: If data does not have the document shape
        """
        if not isinstance(data, dict):
            raise DocumentValidationError(
                "Property document must contain a mapping at root level",
                file_path=file_path,
            )
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise DocumentValidationError(
                f"Invalid property document: {len(errors)} error(s)",
                errors=errors,
                file_path=file_path,
            ) from e

    def null_keys(self) -> list[str]:
        """Keys that hold a null value, directly or inside their list."""
        return [
            key for key, value in self.properties.items()
            if value is None or (isinstance(value, list) and None in value)
        ]

    def to_property_bag(
        self, drop_nulls: bool = False, file_path: str | None = None
    ) -> PropertyBag:
        """
        Build a PropertyBag from the document's properties.

        Keys keep their document order, list values keep their list order.

        Args:
            drop_nulls: Skip null values with a warning instead of failing
            file_path: Source of the document, reported on failure

        Raises:
            DocumentValidationError: If a null value is present and drop_nulls is False
        """
        null_keys = self.null_keys()
        if null_keys and not drop_nulls:
            raise DocumentValidationError(
                "Property values cannot be null",
                errors=[f"properties.{key}: null value" for key in null_keys],
                file_path=file_path,
            )

        bag = PropertyBag()
        for key, value in self.properties.items():
            values = value if isinstance(value, list) else [value]
            for item in values:
                if item is None:
                    logger.warning("Dropping null value of property %r", key)
                    continue
                bag.add(key, item)
        return bag
