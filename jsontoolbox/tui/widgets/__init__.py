"""TUI widgets and renderers for the JSON toolbox."""

from jsontoolbox.tui.widgets.diff_view import (
    render_diff_lines,
    render_diff_summary,
    render_json_lines,
    render_stats,
    render_text_summary,
)
from jsontoolbox.tui.widgets.highlighting import render_highlighted_json

__all__ = [
    # Formatter output
    "render_highlighted_json",
    "render_stats",
    # Comparison output
    "render_json_lines",
    "render_diff_lines",
    "render_diff_summary",
    "render_text_summary",
]
