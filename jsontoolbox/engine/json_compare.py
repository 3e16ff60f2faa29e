"""
Line annotations for the side-by-side JSON comparison.

Each side is re-formatted with two-space indentation and every line that
starts with an object key is tagged using the structural diff report. The
tagging is a lookup by key name: a line is marked when any path of the
relevant bucket contains the key as a substring. It does not resolve the full
path of the line, so a key name shared by several objects marks all of them.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from jsontoolbox.engine.formatter import format_value
from jsontoolbox.engine.parser import try_parse
from jsontoolbox.engine.structural_diff import DiffReport

logger = logging.getLogger(__name__)

_KEY_LINE = re.compile(r'^"([^"]+)":')

SIDES = ("left", "right")


@dataclass(frozen=True)
class JsonLine:
    """A formatted line of one side of a JSON comparison.

    Attributes:
        content: The line text including indentation.
        line_number: 1-based line number.
        kind: "added", "removed", "modified" or "unchanged".
        indent_level: Nesting level derived from the two-space indentation.
    """

    content: str
    line_number: int
    kind: str
    indent_level: int


def _classify_key(key: str, report: DiffReport, side: str) -> str:
    # left shows what was removed, right shows what was added
    own_bucket = report.removed if side == "left" else report.added
    if any(key in path for path in own_bucket):
        return "removed" if side == "left" else "added"
    if any(key in path for path in report.modified):
        return "modified"
    return "unchanged"


def annotate_json_lines(
    text: str | None, report: DiffReport | None, side: str
) -> list[JsonLine]:
    """Format one side of a comparison and tag its lines.

    Args:
        text: The raw JSON of this side.
        report: The structural diff of both sides, or None when there is none
            (every line is then "unchanged").
        side: "left" (original) or "right" (modified).

    Returns:
        One JsonLine per formatted line; empty for blank or invalid text and
        for documents nested too deeply to format.

    Raises:
        ValueError: If ``side`` is not "left" or "right".
    """
    if side not in SIDES:
        raise ValueError(f"Unknown side '{side}'. Expected 'left' or 'right'")

    value = try_parse(text)
    if value is None:
        return []

    try:
        formatted = format_value(value, indent=2)
    except RecursionError:
        logger.debug("Annotation skipped: %s side nested too deeply", side)
        return []

    lines: list[JsonLine] = []
    for index, line in enumerate(formatted.split("\n")):
        stripped = line.strip()
        kind = "unchanged"
        if report is not None and stripped:
            key_match = _KEY_LINE.match(stripped)
            if key_match:
                kind = _classify_key(key_match.group(1), report, side)
        lines.append(
            JsonLine(
                content=line,
                line_number=index + 1,
                kind=kind,
                indent_level=(len(line) - len(line.lstrip())) // 2,
            )
        )
    return lines


def only_differences(lines: list[JsonLine]) -> list[JsonLine]:
    """Drop unchanged lines ("Differences Only" mode)."""
    return [line for line in lines if line.kind != "unchanged"]
