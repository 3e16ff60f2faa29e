"""
Positional line diff for the plain text comparison view.

The two texts are walked with one cursor per side. Equal lines are paired as
unchanged; any other pair is reported as removed on the left and added on the
right. When one side runs out, the rest of the other side is reported against
empty placeholder lines.

This is not a minimal edit script (no LCS / Myers alignment): a
single inserted line shifts every following line out of step, and each of
those positions is reported as a removed/added pair.

Line Kinds:
    - unchanged: the lines at this position are equal
    - removed: left line without an equal partner (placeholder on the right
      once the right side is exhausted)
    - added: right line without an equal partner (placeholder on the left
      once the left side is exhausted)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class DiffLine:
    """One row of one side of a text comparison.

    Attributes:
        kind: "added", "removed" or "unchanged".
        content: The line text; empty for placeholders.
        line_number: 1-based position of the cursor on this side.
    """

    kind: str
    content: str
    line_number: int


@dataclass(frozen=True)
class TextCompareOptions:
    """Preprocessing applied to both texts before they are split into lines.

    Attributes:
        ignore_whitespace: Collapse every whitespace run (newlines included)
            to a single space and trim the ends.
        ignore_case: Lowercase the whole text.
    """

    ignore_whitespace: bool = False
    ignore_case: bool = False

    def toggle_whitespace(self) -> TextCompareOptions:
        return TextCompareOptions(not self.ignore_whitespace, self.ignore_case)

    def toggle_case(self) -> TextCompareOptions:
        return TextCompareOptions(self.ignore_whitespace, not self.ignore_case)


@dataclass(frozen=True)
class TextDiffSummary:
    """Counts shown above a text comparison.

    Attributes:
        total_changes: Added plus removed rows on both sides.
        lines_added: Added rows on the right.
        lines_removed: Removed rows on the left.
        lines_unchanged: Unchanged rows on the left.
    """

    total_changes: int
    lines_added: int
    lines_removed: int
    lines_unchanged: int


@dataclass(frozen=True)
class TextDiff:
    """Parallel left and right rows of equal length."""

    left: tuple[DiffLine, ...]
    right: tuple[DiffLine, ...]

    def summary(self) -> TextDiffSummary:
        left_added = sum(1 for line in self.left if line.kind == "added")
        left_removed = sum(1 for line in self.left if line.kind == "removed")
        right_added = sum(1 for line in self.right if line.kind == "added")
        right_removed = sum(1 for line in self.right if line.kind == "removed")
        return TextDiffSummary(
            total_changes=left_added + left_removed + right_added + right_removed,
            lines_added=right_added,
            lines_removed=left_removed,
            lines_unchanged=sum(1 for line in self.left if line.kind == "unchanged"),
        )


def preprocess_text(text: str, options: TextCompareOptions) -> str:
    """Apply the whitespace and case options to a whole text."""
    if options.ignore_whitespace:
        text = _WHITESPACE_RUN.sub(" ", text).strip()
    if options.ignore_case:
        text = text.lower()
    return text


def diff_lines(
    left_lines: list[str], right_lines: list[str]
) -> tuple[list[DiffLine], list[DiffLine]]:
    """Compare two line lists position by position.

    Args:
        left_lines: Lines of the original text.
        right_lines: Lines of the changed text.

    Returns:
        ``(left, right)`` row lists of equal length.

    Examples:
        >>> left, right = diff_lines(["a", "b", "c"], ["a", "x", "c"])
        >>> [line.kind for line in left]
        ['unchanged', 'removed', 'unchanged']
        >>> [line.kind for line in right]
        ['unchanged', 'added', 'unchanged']
    """
    left: list[DiffLine] = []
    right: list[DiffLine] = []
    i = 0
    j = 0

    while i < len(left_lines) or j < len(right_lines):
        if i >= len(left_lines):
            right.append(DiffLine("added", right_lines[j], j + 1))
            left.append(DiffLine("added", "", i + 1))
            j += 1
        elif j >= len(right_lines):
            left.append(DiffLine("removed", left_lines[i], i + 1))
            right.append(DiffLine("removed", "", j + 1))
            i += 1
        elif left_lines[i] == right_lines[j]:
            left.append(DiffLine("unchanged", left_lines[i], i + 1))
            right.append(DiffLine("unchanged", right_lines[j], j + 1))
            i += 1
            j += 1
        else:
            left.append(DiffLine("removed", left_lines[i], i + 1))
            right.append(DiffLine("added", right_lines[j], j + 1))
            i += 1
            j += 1

    return left, right


def compare_texts(
    left_text: str,
    right_text: str,
    options: TextCompareOptions | None = None,
) -> TextDiff | None:
    """Preprocess, split and diff two texts.

    Args:
        left_text: The original text.
        right_text: The changed text.
        options: Whitespace/case preprocessing; none by default.

    Returns:
        The TextDiff, or None when both texts are empty. An empty text on one
        side still counts as a single empty line.
    """
    if not left_text and not right_text:
        return None
    if options is None:
        options = TextCompareOptions()

    left_lines = preprocess_text(left_text, options).split("\n")
    right_lines = preprocess_text(right_text, options).split("\n")
    left, right = diff_lines(left_lines, right_lines)
    return TextDiff(tuple(left), tuple(right))
