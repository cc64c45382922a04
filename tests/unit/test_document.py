"""Unit tests for the propbag.models.document module."""

from datetime import date

import pytest

from propbag.common.exceptions import DocumentValidationError
from propbag.models.document import PropertyDocument


class TestPropertyDocumentParse:
    """Test suite for PropertyDocument.parse."""

    def test_parse_scalars_and_lists(self):
        # Arrange
        data = {
            "name": "suite",
            "properties": {"Category": ["Slow", "Integration"], "MaxTime": 2000, "Explicit": True},
        }

        # Act
        document = PropertyDocument.parse(data)

        # Assert
        assert document.name == "suite"
        assert document.properties == data["properties"]

    def test_parse_keeps_value_types(self):
        document = PropertyDocument.parse(
            {"properties": {"a": "1", "b": 1, "c": 1.5, "d": False, "e": date(2024, 1, 2)}}
        )

        assert [type(v) for v in document.properties.values()] == [str, int, float, bool, date]

    def test_parse_empty_document(self):
        document = PropertyDocument.parse({})

        assert document.properties == {}
        assert document.name is None

    def test_parse_rejects_non_mapping_root(self):
        with pytest.raises(DocumentValidationError, match="mapping at root level"):
            PropertyDocument.parse(["Category", "Slow"], file_path="p.yaml")

    def test_parse_rejects_nested_mappings(self):
        with pytest.raises(DocumentValidationError) as exc_info:
            PropertyDocument.parse({"properties": {"Category": {"nested": "no"}}})

        assert exc_info.value.errors
        assert all(error.startswith("properties.Category") for error in exc_info.value.errors)

    def test_parse_rejects_unknown_top_level_fields(self):
        with pytest.raises(DocumentValidationError) as exc_info:
            PropertyDocument.parse({"props": {}}, file_path="p.yaml")

        assert exc_info.value.file_path == "p.yaml"
        assert any("props" in error for error in exc_info.value.errors)


class TestPropertyDocumentToBag:
    """Test suite for PropertyDocument.to_property_bag."""

    def test_to_property_bag_preserves_order(self):
        # Arrange
        document = PropertyDocument.parse(
            {"properties": {"Category": ["Slow", "Integration"], "Author": "Jane"}}
        )

        # Act
        bag = document.to_property_bag()

        # Assert
        assert list(bag.keys) == ["Category", "Author"]
        assert bag["Category"] == ["Slow", "Integration"]
        assert bag.get("Author") == "Jane"

    def test_null_keys(self):
        document = PropertyDocument.parse(
            {"properties": {"a": None, "b": ["x", None], "c": "y"}}
        )

        assert document.null_keys() == ["a", "b"]

    def test_nulls_rejected_by_default(self):
        document = PropertyDocument.parse({"properties": {"a": None, "c": "y"}})

        with pytest.raises(DocumentValidationError) as exc_info:
            document.to_property_bag()

        assert exc_info.value.errors == ["properties.a: null value"]
        assert exc_info.value.file_path is None

    def test_null_error_reports_source_path(self):
        document = PropertyDocument.parse({"properties": {"a": None}})

        with pytest.raises(DocumentValidationError) as exc_info:
            document.to_property_bag(file_path="suite/properties.yaml")

        assert exc_info.value.file_path == "suite/properties.yaml"

    def test_nulls_dropped_with_warning(self, caplog):
        # Arrange
        document = PropertyDocument.parse(
            {"properties": {"a": None, "b": ["x", None], "c": "y"}}
        )

        # Act
        with caplog.at_level("WARNING", logger="propbag.models.document"):
            bag = document.to_property_bag(drop_nulls=True)

        # Assert
        assert bag.to_dict() == {"b": ["x"], "c": ["y"]}
        assert "Dropping null value of property 'a'" in caplog.text
