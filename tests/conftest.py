"""Pytest configuration and shared fixtures for the JSON toolbox tests."""

from __future__ import annotations

import pytest

from jsontoolbox.engine import Value, parse
from jsontoolbox.engine.samples import (
    COMPARE_SAMPLE_LEFT,
    COMPARE_SAMPLE_RIGHT,
    FORMAT_SAMPLE,
    TEXT_SAMPLE_LEFT,
    TEXT_SAMPLE_RIGHT,
)


@pytest.fixture
def compare_left() -> str:
    """Return the original document of the compare sample."""
    return COMPARE_SAMPLE_LEFT


@pytest.fixture
def compare_right() -> str:
    """Return the modified document of the compare sample."""
    return COMPARE_SAMPLE_RIGHT


@pytest.fixture
def format_sample() -> str:
    """Return the minified formatter sample."""
    return FORMAT_SAMPLE


@pytest.fixture
def text_pair() -> tuple[str, str]:
    """Return the original and modified text compare samples."""
    return TEXT_SAMPLE_LEFT, TEXT_SAMPLE_RIGHT


@pytest.fixture
def nested_value() -> Value:
    """Return a document using every value kind at several depths."""
    return parse(
        """
        {
          "id": 7,
          "name": "widget",
          "price": 12.5,
          "active": true,
          "discontinued": false,
          "parent": null,
          "tags": ["a", "b", "c"],
          "dimensions": {"w": 1, "h": 2, "unit": "cm"},
          "variants": [
            {"sku": "w-1", "stock": 0},
            {"sku": "w-2", "stock": null}
          ]
        }
        """
    )


@pytest.fixture
def value_pairs() -> list[tuple[Value, Value]]:
    """Return pairs of documents with assorted differences."""
    texts = [
        ('{"a": 1}', '{"a": 2}'),
        ('{"a": 1}', '{"a": 1, "b": 2}'),
        ('{"a": {"b": 1, "c": [1, 2]}}', '{"a": {"b": 1, "c": [1]}, "d": null}'),
        ('[1, 2, 3]', '[1, 3]'),
        ('{"a": [{"x": 1}], "b": "1"}', '{"a": [{"x": 1, "y": 2}], "b": 1}'),
        ('{"a": {"b": 1}}', '{"a": 5}'),
        ('{}', '{"z": {"y": {"x": true}}}'),
    ]
    return [(parse(left), parse(right)) for left, right in texts]
