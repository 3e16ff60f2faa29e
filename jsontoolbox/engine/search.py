"""
Literal text search with cyclic match navigation.

Search is plain substring matching, line by line. Overlapping occurrences are
all reported: after a hit the scan resumes one character past the start of
that hit, so searching ``"aa"`` in ``"aaa"`` finds two matches.

The engine keeps no state. The index of the currently highlighted match is
owned by the caller and moved with :func:`next_index` / :func:`previous_index`.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchMatch:
    """One occurrence of the query.

    Attributes:
        line: Zero-based line index.
        column: Zero-based column of the first matched character.
        length: Length of the query.
        text: The matched characters as they appear in the original line.
    """

    line: int
    column: int
    length: int
    text: str

    @property
    def end(self) -> int:
        return self.column + self.length


def _fold_case(text: str) -> str:
    """Lowercase ``text`` one character at a time, keeping its length."""
    folded = []
    for char in text:
        lower = char.lower()
        folded.append(lower if len(lower) == 1 else char)
    return "".join(folded)


def search(query: str, text: str, case_sensitive: bool = False) -> list[SearchMatch]:
    """Find every occurrence of ``query`` in ``text``.

    Args:
        query: The literal text to find.
        text: The text to search, split into lines on ``"\\n"``.
        case_sensitive: When False both sides are lowercased before matching;
            the reported ``text`` still comes from the original line.
            Characters whose lowercase form is longer than one character
            (such as ``"İ"``) are left as they are, so columns always
            index the original line.

    Returns:
        Matches ordered by (line, column). Empty if the query or text is empty.

    Examples:
        >>> [(m.line, m.column) for m in search("aa", "aaa")]
        [(0, 0), (0, 1)]
        >>> search("NAME", '{"name": 1}')[0].text
        'name'
    """
    if not query or not text:
        return []

    needle = query if case_sensitive else _fold_case(query)
    matches: list[SearchMatch] = []

    for line_index, line in enumerate(text.split("\n")):
        haystack = line if case_sensitive else _fold_case(line)
        start = 0
        while True:
            found = haystack.find(needle, start)
            if found == -1:
                break
            matches.append(
                SearchMatch(
                    line=line_index,
                    column=found,
                    length=len(query),
                    text=line[found:found + len(query)],
                )
            )
            start = found + 1

    return matches


def next_index(current: int, count: int) -> int:
    """Move to the next match, wrapping from the last back to the first.

    With no matches the index is returned unchanged.
    """
    if count <= 0:
        return current
    return (current + 1) % count


def previous_index(current: int, count: int) -> int:
    """Move to the previous match, wrapping from the first to the last.

    With no matches the index is returned unchanged.
    """
    if count <= 0:
        return current
    return (current - 1 + count) % count


def match_position_label(current: int, count: int) -> str:
    """Return the "3 of 7" style label, or an empty string with no matches."""
    if count <= 0:
        return ""
    return f"{current + 1} of {count}"


def matches_on_line(matches: list[SearchMatch], line_index: int) -> list[SearchMatch]:
    return [match for match in matches if match.line == line_index]
