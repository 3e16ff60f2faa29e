"""
Syntax highlighting for formatted JSON.

Turns the tokenizer's output into a ``rich.text.Text`` with one style per
token kind, a line number gutter and search hit highlighting. The current
search hit is drawn with a stronger style than the other hits.
"""

from __future__ import annotations

from rich.text import Text

from jsontoolbox.engine import SearchMatch, tokenize_line

TOKEN_STYLES: dict[str, str] = {
    "key": "bold #5f87ff",
    "string": "#5faf5f",
    "number": "#af87ff",
    "boolean": "bold #ff8700",
    "null": "bold #8a8a8a",
    "punctuation": "#bcbcbc",
    "whitespace": "",
}

SEARCH_HIT_STYLE = "on #5f5f00"
CURRENT_HIT_STYLE = "bold black on #ffd700"
GUTTER_STYLE = "#6c6c6c"


def gutter_width(line_count: int) -> int:
    """Width of the line number column for a document of ``line_count`` lines."""
    return max(len(str(line_count)), 2)


def render_highlighted_json(
    formatted: str,
    matches: list[SearchMatch] | None = None,
    current_index: int = 0,
) -> Text:
    """Render formatted JSON with token colors and search highlights.

    Args:
        formatted: The formatted JSON text.
        matches: Search matches within ``formatted``.
        current_index: Index into ``matches`` of the current hit.

    Returns:
        A Text with one row per line, each prefixed by its 1-based number.
    """
    text = Text(no_wrap=True)
    if not formatted:
        return text

    lines = formatted.split("\n")
    width = gutter_width(len(lines))
    line_offsets: list[int] = []

    for line_index, line in enumerate(lines):
        if line_index:
            text.append("\n")
        text.append(f"{line_index + 1:>{width}} ", style=GUTTER_STYLE)
        line_offsets.append(len(text))
        for token in tokenize_line(line, line_index):
            text.append(token.text, style=TOKEN_STYLES.get(token.kind, ""))

    for index, match in enumerate(matches or []):
        if match.line >= len(line_offsets):
            continue
        start = line_offsets[match.line] + match.column
        style = CURRENT_HIT_STYLE if index == current_index else SEARCH_HIT_STYLE
        text.stylize(style, start, start + match.length)

    return text
