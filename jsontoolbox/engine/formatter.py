"""
JSON formatting utilities.

This module pretty-prints, minifies and saves JSON documents for the
formatter view.

Indent Widths:
    - 2, 4, 8: pretty-printed with that many spaces per level
    - 0: minified (no whitespace at all)

Formatting never raises on bad input: blank or invalid text formats to an
empty string so the view simply shows nothing.
"""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path

from jsontoolbox.engine.normalizer import normalize_keys
from jsontoolbox.engine.parser import ParseFailure, is_blank, parse, try_parse
from jsontoolbox.engine.stats import Stats, collect_stats
from jsontoolbox.engine.values import Value, to_python

logger = logging.getLogger(__name__)


# Indent widths offered by the formatter, in the order they are cycled
INDENT_CHOICES: tuple[int, ...] = (2, 4, 8, 0)

DEFAULT_INDENT = 2

DEFAULT_SAVE_NAME = "formatted.json"

# Unpaired UTF-16 halves survive json.loads but cannot be encoded as UTF-8
_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


@dataclass(frozen=True)
class FormatOptions:
    """Formatting settings for the formatter view.

    Attributes:
        indent: Spaces per nesting level, one of INDENT_CHOICES. 0 minifies.
        sort_keys: Whether object keys are sorted before serializing.

    Examples:
        >>> FormatOptions(indent=4).cycle_indent().indent
        8
        >>> FormatOptions(indent=3)
        Traceback (most recent call last):
        ...
        ValueError: Unsupported indent width 3. Supported widths: 0, 2, 4, 8
    """

    indent: int = DEFAULT_INDENT
    sort_keys: bool = False

    def __post_init__(self) -> None:
        if self.indent not in INDENT_CHOICES:
            raise ValueError(
                f"Unsupported indent width {self.indent}. "
                f"Supported widths: {', '.join(str(w) for w in sorted(INDENT_CHOICES))}"
            )

    @property
    def minified(self) -> bool:
        return self.indent == 0

    @property
    def indent_label(self) -> str:
        return "Minified" if self.minified else f"{self.indent} spaces"

    def cycle_indent(self) -> FormatOptions:
        """Return options with the next indent width (2 -> 4 -> 8 -> 0 -> 2)."""
        position = INDENT_CHOICES.index(self.indent)
        next_indent = INDENT_CHOICES[(position + 1) % len(INDENT_CHOICES)]
        return FormatOptions(indent=next_indent, sort_keys=self.sort_keys)

    def toggle_sort_keys(self) -> FormatOptions:
        return FormatOptions(indent=self.indent, sort_keys=not self.sort_keys)


def format_value(value: Value, indent: int = DEFAULT_INDENT, sort_keys: bool = False) -> str:
    """Serialize a value.

    Args:
        value: The value to serialize.
        indent: Spaces per level; 0 produces minified output.
        sort_keys: Sort object keys recursively first.

    Returns:
        The JSON text. Non-ASCII characters are kept as-is and newlines inside
        strings are always escaped, so every line of the output is a complete
        lexical unit. Unpaired surrogates are written as \\u escapes so the
        output can always be saved as UTF-8.
    """
    if sort_keys:
        value = normalize_keys(value)

    data = to_python(value)
    if indent == 0:
        text = json.dumps(data, ensure_ascii=False, separators=(",", ":"))
    else:
        text = json.dumps(data, ensure_ascii=False, indent=indent, separators=(",", ": "))
    return _LONE_SURROGATE.sub(_escape_surrogate, text)


def _escape_surrogate(match: re.Match) -> str:
    return "\\u%04x" % ord(match.group())


def format_json(text: str | None, options: FormatOptions | None = None) -> str:
    """Parse and reformat a JSON document.

    Args:
        text: The raw JSON input.
        options: Indent and key sorting. Defaults to 2 spaces, unsorted.

    Returns:
        The formatted document, or an empty string if the input is blank or
        invalid.

    Examples:
        >>> format_json('{"b":1,"a":[true,null]}', FormatOptions(sort_keys=True))
        '{\\n  "a": [\\n    true,\\n    null\\n  ],\\n  "b": 1\\n}'
        >>> format_json('{"a": }')
        ''
    """
    if options is None:
        options = FormatOptions()

    if is_blank(text):
        return ""

    try:
        value = parse(text)
        return format_value(value, options.indent, options.sort_keys)
    except (ParseFailure, RecursionError) as e:
        logger.debug("Formatting skipped: %s", e)
        return ""


def minify_json(text: str) -> str:
    """Return the minified form of ``text``, or ``text`` itself if it is not valid JSON."""
    value = try_parse(text)
    if value is None:
        return text
    try:
        return format_value(value, indent=0)
    except RecursionError:
        logger.debug("Minify skipped: document nested too deeply")
        return text


def json_stats(formatted_text: str | None) -> Stats | None:
    """Collect value statistics for the formatted output, if there is any."""
    if not formatted_text:
        return None
    value = try_parse(formatted_text)
    if value is None:
        return None
    try:
        return collect_stats(value)
    except RecursionError:
        logger.debug("Stats skipped: document nested too deeply")
        return None


def save_formatted(
    formatted: str,
    output_dir: str,
    filename: str = DEFAULT_SAVE_NAME,
) -> str:
    """
    Write formatted JSON to a ``.json`` file.

    The text is written verbatim as UTF-8: no re-serialization and no newline
    translation. Creates the output directory if it doesn't exist.

    Args:
        formatted: The formatted JSON text.
        output_dir: Directory path for the output file.
        filename: File name; ``.json`` is appended when it has another suffix
            or none.

    Returns:
        The path to the created file.

    Raises:
        OSError: If the directory cannot be created or the file cannot be written.
        UnicodeEncodeError: If ``formatted`` holds unpaired surrogates, which
            :func:`format_value` never produces.

    Examples:
        >>> path = save_formatted(format_json(text), "exports")
        >>> print(path)  # "exports/formatted.json"
    """
    os.makedirs(output_dir, exist_ok=True)

    if Path(filename).suffix.lower() != ".json":
        filename = f"{filename}.json"
    output_path = Path(output_dir) / filename

    # Encode first so a failed encode leaves no truncated file behind
    data = formatted.encode("utf-8")
    with open(output_path, "wb") as f:
        f.write(data)

    logger.debug("Saved %d characters to %s", len(formatted), output_path)
    return str(output_path)
