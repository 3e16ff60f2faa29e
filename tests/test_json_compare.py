"""Tests for comparison line annotation in jsontoolbox/engine/json_compare.py."""

from __future__ import annotations

import pytest

from jsontoolbox.engine import (
    DiffReport,
    JsonLine,
    annotate_json_lines,
    compare_json,
    only_differences,
)


def kind_of(lines, key):
    """Return the kind of the line holding ``key``."""
    for line in lines:
        if line.content.strip().startswith(f'"{key}":'):
            return line.kind
    raise AssertionError(f"no line for key {key}")


@pytest.fixture
def sample_report(compare_left, compare_right) -> DiffReport:
    return compare_json(compare_left, compare_right)


class TestAnnotateLeft:
    """Tests for the original (left) side."""

    def test_modified_keys(self, compare_left, sample_report):
        """Keys of modified paths should be marked modified."""
        lines = annotate_json_lines(compare_left, sample_report, "left")

        assert kind_of(lines, "age") == "modified"
        assert kind_of(lines, "email") == "modified"
        assert kind_of(lines, "hobbies") == "modified"

    def test_unchanged_keys(self, compare_left, sample_report):
        """Keys without changes should be unchanged."""
        lines = annotate_json_lines(compare_left, sample_report, "left")

        assert kind_of(lines, "name") == "unchanged"
        assert kind_of(lines, "city") == "unchanged"
        assert kind_of(lines, "isActive") == "unchanged"

    def test_removed_keys(self):
        """Keys of removed paths should be marked removed on the left."""
        left = '{"keep": 1, "drop": 2}'
        report = compare_json(left, '{"keep": 1}')
        lines = annotate_json_lines(left, report, "left")

        assert kind_of(lines, "drop") == "removed"
        assert kind_of(lines, "keep") == "unchanged"


class TestAnnotateRight:
    """Tests for the modified (right) side."""

    def test_added_keys(self, compare_right, sample_report):
        """Keys of added paths should be marked added."""
        lines = annotate_json_lines(compare_right, sample_report, "right")

        assert kind_of(lines, "country") == "added"
        assert kind_of(lines, "phone") == "added"

    def test_parent_of_added_key_matches_by_substring(self, compare_right, sample_report):
        """A key contained in an added path is marked too."""
        lines = annotate_json_lines(compare_right, sample_report, "right")
        assert kind_of(lines, "address") == "added"

    def test_modified_keys(self, compare_right, sample_report):
        """Modified paths are marked on the right as well."""
        lines = annotate_json_lines(compare_right, sample_report, "right")
        assert kind_of(lines, "age") == "modified"


class TestAnnotateLines:
    """Tests for line layout and degenerate input."""

    def test_lines_are_reformatted(self):
        """Input is re-formatted with two spaces before annotating."""
        lines = annotate_json_lines('{"a":{"b":1}}', None, "left")

        assert [line.content for line in lines] == ["{", '  "a": {', '    "b": 1', "  }", "}"]
        assert [line.line_number for line in lines] == [1, 2, 3, 4, 5]
        assert [line.indent_level for line in lines] == [0, 1, 2, 1, 0]

    def test_no_report_means_unchanged(self, compare_left):
        """Without a report every line is unchanged."""
        lines = annotate_json_lines(compare_left, None, "left")

        assert lines
        assert {line.kind for line in lines} == {"unchanged"}

    def test_non_key_lines_unchanged(self, compare_left, sample_report):
        """Brackets and array elements are never marked."""
        lines = annotate_json_lines(compare_left, sample_report, "left")
        assert lines[0] == JsonLine("{", 1, "unchanged", 0)
        assert kind_of(lines, "hobbies") == "modified"
        element = next(line for line in lines if line.content.strip() == '"swimming"')
        assert element.kind == "unchanged"

    @pytest.mark.parametrize("text", ["", "  ", "{", None])
    def test_blank_or_invalid_gives_no_lines(self, text, sample_report):
        """Nothing can be shown for blank or invalid text."""
        assert annotate_json_lines(text, sample_report, "left") == []

    def test_too_deep_to_format_gives_no_lines(self):
        """A document nested too deeply to re-format shows nothing instead of raising."""
        text = '{"a":' * 900 + "1" + "}" * 900
        assert annotate_json_lines(text, None, "left") == []

    def test_recursion_while_formatting_gives_no_lines(self, monkeypatch):
        """Running out of recursion while formatting yields no lines."""

        def exhausted(*args, **kwargs):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr("jsontoolbox.engine.json_compare.format_value", exhausted)
        assert annotate_json_lines('{"a": 1}', None, "right") == []

    def test_unknown_side_raises(self):
        """Only left and right are valid sides."""
        with pytest.raises(ValueError, match="Unknown side"):
            annotate_json_lines("{}", None, "middle")


class TestOnlyDifferences:
    """Tests for the differences-only filter."""

    def test_drops_unchanged_lines(self, compare_right, sample_report):
        """Only changed lines should remain."""
        lines = only_differences(annotate_json_lines(compare_right, sample_report, "right"))

        assert lines
        assert all(line.kind != "unchanged" for line in lines)
        assert any('"phone"' in line.content for line in lines)

    def test_keeps_line_numbers(self):
        """Filtered lines keep their original numbers."""
        lines = [
            JsonLine("{", 1, "unchanged", 0),
            JsonLine('  "a": 1', 2, "added", 1),
            JsonLine("}", 3, "unchanged", 0),
        ]
        assert only_differences(lines) == [JsonLine('  "a": 1', 2, "added", 1)]
