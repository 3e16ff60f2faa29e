"""Tests for formatting, minifying and saving in jsontoolbox/engine/formatter.py."""

from __future__ import annotations

import json

import pytest

from jsontoolbox.engine import (
    INDENT_CHOICES,
    FormatOptions,
    Stats,
    format_json,
    format_value,
    json_stats,
    minify_json,
    parse,
    save_formatted,
)


class TestFormatJson:
    """Tests for format_json."""

    def test_default_two_space_indent(self):
        """The default should be two spaces per level."""
        assert format_json('{"a":[1,true]}') == '{\n  "a": [\n    1,\n    true\n  ]\n}'

    @pytest.mark.parametrize("indent", [2, 4, 8])
    def test_indent_widths(self, indent):
        """Nested lines should be indented by the chosen width."""
        formatted = format_json('{"a":1}', FormatOptions(indent=indent))
        assert formatted.split("\n")[1] == " " * indent + '"a": 1'

    def test_indent_zero_minifies(self):
        """Indent 0 should produce output without any whitespace."""
        formatted = format_json('{ "a" : [ 1 , 2 ], "b": "x y" }', FormatOptions(indent=0))
        assert formatted == '{"a":[1,2],"b":"x y"}'

    def test_sort_keys(self):
        """sort_keys should sort every object recursively."""
        formatted = format_json('{"b":{"d":1,"c":2},"a":0}', FormatOptions(indent=0, sort_keys=True))
        assert formatted == '{"a":0,"b":{"c":2,"d":1}}'

    def test_keeps_key_order_by_default(self):
        """Without sort_keys the document order is kept."""
        assert format_json('{"b":1,"a":2}', FormatOptions(indent=0)) == '{"b":1,"a":2}'

    def test_non_ascii_kept(self):
        """Non-ASCII characters should not be escaped."""
        assert format_json('{"city": "Zürich"}', FormatOptions(indent=0)) == '{"city":"Zürich"}'

    def test_newlines_in_strings_escaped(self):
        """A newline inside a string stays escaped, keeping one value per line."""
        formatted = format_json('{"a": "x\\ny"}')
        assert formatted.split("\n")[1] == '  "a": "x\\ny"'

    @pytest.mark.parametrize("text", ["", "   ", "{", '{"a": }', "NaN"])
    def test_blank_or_invalid_gives_empty_string(self, text):
        """Formatting never raises, it returns an empty string."""
        assert format_json(text) == ""

    def test_none_input(self):
        """None is treated as no input."""
        assert format_json(None) == ""

    @pytest.mark.parametrize("indent", INDENT_CHOICES)
    @pytest.mark.parametrize("sort_keys", [False, True])
    def test_idempotent(self, format_sample, indent, sort_keys):
        """Formatting formatted output again should not change it."""
        options = FormatOptions(indent=indent, sort_keys=sort_keys)
        once = format_json(format_sample, options)

        assert once
        assert format_json(once, options) == once

    def test_output_is_equivalent_json(self, format_sample):
        """The formatted text should decode to the same data."""
        assert json.loads(format_json(format_sample)) == json.loads(format_sample)

    def test_overflowing_number_becomes_null(self):
        """A number too large for a float is written as null, never as Infinity."""
        formatted = format_json('{"a": 1e400, "b": -1e400}')

        assert formatted == '{\n  "a": null,\n  "b": null\n}'
        assert format_json(formatted) == formatted

    def test_lone_surrogate_is_escaped(self):
        """An unpaired surrogate stays a \\u escape so the output is valid UTF-8."""
        formatted = format_json('{"a": "x\\ud800y"}', FormatOptions(indent=0))

        assert formatted == '{"a":"x\\ud800y"}'
        assert formatted.encode("utf-8")
        assert format_json(formatted, FormatOptions(indent=0)) == formatted

    def test_surrogate_pair_is_kept_as_character(self):
        """A valid surrogate pair decodes to one character and is written as-is."""
        assert format_json('"\\ud83d\\ude00"') == '"\U0001f600"'


class TestFormatValue:
    """Tests for serializing an already parsed value."""

    def test_matches_format_json(self):
        """format_value on a parsed value equals format_json on its text."""
        text = '{"x": [1, {"y": null}]}'
        assert format_value(parse(text), indent=4) == format_json(text, FormatOptions(indent=4))

    def test_scalar(self):
        """Scalar documents serialize to their literal."""
        assert format_value(parse("false")) == "false"


class TestFormatOptions:
    """Tests for the FormatOptions configuration."""

    def test_defaults(self):
        """Defaults should be two spaces without sorting."""
        options = FormatOptions()
        assert options.indent == 2
        assert options.sort_keys is False

    @pytest.mark.parametrize("indent", [-1, 1, 3, 16])
    def test_rejects_unsupported_indent(self, indent):
        """Indent widths outside the choices should raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported indent width"):
            FormatOptions(indent=indent)

    def test_cycle_indent(self):
        """cycle_indent should walk 2 -> 4 -> 8 -> 0 -> 2."""
        options = FormatOptions(indent=2, sort_keys=True)
        seen = []
        for _ in range(4):
            options = options.cycle_indent()
            seen.append(options.indent)

        assert seen == [4, 8, 0, 2]
        assert options.sort_keys is True

    def test_toggle_sort_keys(self):
        """toggle_sort_keys should flip only the sort flag."""
        options = FormatOptions(indent=8).toggle_sort_keys()
        assert options == FormatOptions(indent=8, sort_keys=True)

    def test_indent_label(self):
        """The label names the width or says Minified."""
        assert FormatOptions(indent=4).indent_label == "4 spaces"
        assert FormatOptions(indent=0).indent_label == "Minified"
        assert FormatOptions(indent=0).minified


class TestMinifyJson:
    """Tests for minify_json."""

    def test_minifies_valid_json(self):
        """Valid JSON should lose all insignificant whitespace."""
        assert minify_json('{\n  "a": [1, 2]\n}') == '{"a":[1,2]}'

    def test_invalid_input_returned_unchanged(self):
        """Text that is not JSON should come back untouched."""
        assert minify_json("{ not json") == "{ not json"
        assert minify_json("") == ""

    def test_too_deep_to_serialize_returned_unchanged(self, monkeypatch):
        """Running out of recursion while serializing leaves the text as it was."""

        def exhausted(*args, **kwargs):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr("jsontoolbox.engine.formatter.format_value", exhausted)
        assert minify_json('{"a": [1]}') == '{"a": [1]}'


class TestJsonStats:
    """Tests for json_stats."""

    def test_stats_for_formatted_output(self):
        """Stats should be collected from the formatted text."""
        assert json_stats(format_json('{"a": [1, "x"]}')) == Stats(objects=1, arrays=1, strings=1, numbers=1)

    def test_no_stats_without_output(self):
        """An empty output has no stats."""
        assert json_stats("") is None
        assert json_stats(None) is None

    def test_no_stats_when_too_deep_to_count(self, monkeypatch):
        """Running out of recursion while counting gives no stats instead of raising."""

        def exhausted(value):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr("jsontoolbox.engine.formatter.collect_stats", exhausted)
        assert json_stats('{"a": 1}') is None


class TestSaveFormatted:
    """Tests for writing the formatted document to disk."""

    def test_writes_text_verbatim(self, tmp_path):
        """The file should contain exactly the formatted text in UTF-8."""
        formatted = format_json('{"name": "Zoë", "n": 1}')
        path = save_formatted(formatted, str(tmp_path))

        assert path == str(tmp_path / "formatted.json")
        assert (tmp_path / "formatted.json").read_bytes() == formatted.encode("utf-8")

    def test_creates_output_directory(self, tmp_path):
        """Missing output directories should be created."""
        output_dir = tmp_path / "nested" / "exports"
        save_formatted("{}", str(output_dir))
        assert (output_dir / "formatted.json").read_text(encoding="utf-8") == "{}"

    def test_appends_json_suffix(self, tmp_path):
        """File names without a .json suffix should get one."""
        path = save_formatted("[]", str(tmp_path), "result")
        assert path.endswith("result.json")

    def test_keeps_json_suffix(self, tmp_path):
        """File names already ending in .json should be kept."""
        path = save_formatted("[]", str(tmp_path), "out.json")
        assert path == str(tmp_path / "out.json")

    def test_overwrites_existing_file(self, tmp_path):
        """Saving twice should keep only the latest text."""
        save_formatted('{"a": 1}', str(tmp_path))
        save_formatted("[]", str(tmp_path))
        assert (tmp_path / "formatted.json").read_text(encoding="utf-8") == "[]"

    def test_saves_output_with_escaped_surrogate(self, tmp_path):
        """Formatted output of a document with a lone surrogate can be saved."""
        formatted = format_json('"\\ud800"')
        save_formatted(formatted, str(tmp_path))

        assert (tmp_path / "formatted.json").read_text(encoding="utf-8") == '"\\ud800"'

    def test_unencodable_text_writes_nothing(self, tmp_path):
        """Text that is not valid UTF-8 raises before the file is created."""
        with pytest.raises(UnicodeEncodeError):
            save_formatted('"\ud800"', str(tmp_path))

        assert not (tmp_path / "formatted.json").exists()
