"""Pytest configuration and fixtures for propbag tests.

This module provides shared fixtures for the propbag test suite: ready-made
bags and property documents written to temporary files.
"""

import json

import pytest

from propbag.core.property_bag import PropertyBag


@pytest.fixture
def empty_bag() -> PropertyBag:
    """A freshly created bag."""
    return PropertyBag()


@pytest.fixture
def sample_bag() -> PropertyBag:
    """Bag with two categories and an author, in that insertion order."""
    bag = PropertyBag()
    bag.add("category", "Slow")
    bag.add("category", "Integration")
    bag.set("author", "Jane")
    return bag


SAMPLE_YAML = """\
name: checkout-tests
description: Metadata for the checkout suite
properties:
  Category:
    - Slow
    - Integration
  Author: Jane
  MaxTime: 2000
"""


@pytest.fixture
def sample_yaml_file(tmp_path):
    """Create a temporary YAML property document."""
    file_path = tmp_path / "properties.yaml"
    file_path.write_text(SAMPLE_YAML, encoding="utf-8")
    return file_path


@pytest.fixture
def sample_json_file(tmp_path):
    """Create a temporary JSON property document with the same content as the YAML one."""
    content = {
        "name": "checkout-tests",
        "description": "Metadata for the checkout suite",
        "properties": {
            "Category": ["Slow", "Integration"],
            "Author": "Jane",
            "MaxTime": 2000,
        },
    }
    file_path = tmp_path / "properties.json"
    file_path.write_text(json.dumps(content), encoding="utf-8")
    return file_path


@pytest.fixture
def null_value_yaml_file(tmp_path):
    """Create a YAML property document holding null values."""
    file_path = tmp_path / "nulls.yaml"
    file_path.write_text(
        "properties:\n"
        "  Category: [Slow, null]\n"
        "  Description: null\n"
        "  Author: Jane\n",
        encoding="utf-8",
    )
    return file_path
