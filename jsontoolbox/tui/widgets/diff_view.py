"""
Renderers for comparison results.

Diff Styles:
    - added: green background, "+" marker
    - removed: red background, "-" marker
    - modified: amber background, "~" marker
    - unchanged: no background
"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from jsontoolbox.engine import (
    DIFF_BUCKETS,
    DiffLine,
    DiffReport,
    JsonLine,
    Stats,
    TextDiffSummary,
    summarize_bucket,
)
from jsontoolbox.tui.widgets.highlighting import GUTTER_STYLE, gutter_width

LINE_STYLES: dict[str, str] = {
    "added": "on #1c3d1c",
    "removed": "on #4a1c1c",
    "modified": "on #4a4000",
    "unchanged": "",
}

LINE_MARKERS: dict[str, str] = {
    "added": "+",
    "removed": "-",
    "modified": "~",
    "unchanged": " ",
}

BUCKET_TITLES: dict[str, str] = {
    "added": "Added Fields",
    "removed": "Removed Fields",
    "modified": "Modified Fields",
    "same": "Unchanged Fields",
}

BUCKET_STYLES: dict[str, str] = {
    "added": "bold green",
    "removed": "bold red",
    "modified": "bold yellow",
    "same": "bold",
}


def render_json_lines(lines: list[JsonLine]) -> Text:
    """Render annotated JSON lines with a gutter and change markers."""
    text = Text(no_wrap=True)
    width = gutter_width(max((line.line_number for line in lines), default=0))
    for index, line in enumerate(lines):
        if index:
            text.append("\n")
        text.append(f"{line.line_number:>{width}} ", style=GUTTER_STYLE)
        text.append(f"{LINE_MARKERS[line.kind]} {line.content}", style=LINE_STYLES[line.kind])
    return text


def render_diff_lines(lines: list[DiffLine] | tuple[DiffLine, ...]) -> Text:
    """Render one side of a text comparison.

    Placeholder rows (empty content) get no line number.
    """
    text = Text(no_wrap=True)
    width = gutter_width(max((line.line_number for line in lines), default=0))
    for index, line in enumerate(lines):
        if index:
            text.append("\n")
        number = str(line.line_number) if line.content else ""
        text.append(f"{number:>{width}} ", style=GUTTER_STYLE)
        text.append(
            f"{LINE_MARKERS[line.kind]} {line.content or ' '}",
            style=LINE_STYLES[line.kind],
        )
    return text


def render_diff_summary(report: DiffReport | None) -> Table | Text:
    """Render the four bucket counts with a preview of their first paths."""
    if report is None:
        return Text("Enter valid JSON on both sides to see the comparison summary.", style="dim")

    table = Table(title="Comparison Summary", expand=True, show_lines=False)
    for name in DIFF_BUCKETS:
        table.add_column(BUCKET_TITLES[name], style=BUCKET_STYLES[name], ratio=1)

    cells = []
    for name in DIFF_BUCKETS:
        paths = report.bucket(name)
        preview, remaining = summarize_bucket(paths)
        cell = Text(str(len(paths)), style=BUCKET_STYLES[name])
        for path in preview:
            cell.append(f"\n{path}", style="not bold")
        if remaining:
            cell.append(f"\n+{remaining} more", style="dim")
        cells.append(cell)
    table.add_row(*cells)
    return table


def render_text_summary(summary: TextDiffSummary | None) -> Text:
    if summary is None:
        return Text("Enter text on either side to compare.", style="dim")
    text = Text()
    text.append(f"Total changes: {summary.total_changes}", style="bold")
    text.append("   ")
    text.append(f"Lines added: {summary.lines_added}", style="bold green")
    text.append("   ")
    text.append(f"Lines removed: {summary.lines_removed}", style="bold red")
    text.append("   ")
    text.append(f"Unchanged: {summary.lines_unchanged}")
    return text


def render_stats(stats: Stats | None) -> Text:
    """Render the JSON Statistics panel of the formatter view."""
    if stats is None:
        return Text("")
    text = Text("JSON Statistics  ", style="bold")
    parts = [f"{name.capitalize()}: {count}" for name, count in stats.as_dict().items()]
    text.append("   ".join(parts))
    return text
