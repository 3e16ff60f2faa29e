"""
Formatter Screen for beautifying, validating and searching JSON.

The input document is re-formatted on every edit with the selected indent
width and key order, rendered with syntax highlighting, and searched for the
query typed in the search box.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Static, TextArea

from jsontoolbox.engine import (
    FormatOptions,
    SearchMatch,
    format_json,
    json_stats,
    match_position_label,
    minify_json,
    next_index,
    previous_index,
    search,
    validation_message,
)
from jsontoolbox.engine.samples import FORMAT_SAMPLE
from jsontoolbox.tui.mixins import ExportMixin
from jsontoolbox.tui.widgets import render_highlighted_json, render_stats


class FormatterScreen(ExportMixin, Screen):
    """JSON formatter view with highlighting, search and statistics."""

    CSS = """
    FormatterScreen {
        layout: vertical;
    }

    #format-input-panel {
        width: 40%;
    }

    #format-output-panel {
        width: 60%;
    }

    #options-bar, #search-status, #stats, #char-count {
        height: auto;
        padding: 0 1;
    }

    #search-input {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("f5", "load_sample", "Load Sample"),
        Binding("f6", "clear", "Clear"),
        Binding("f7", "cycle_indent", "Indent"),
        Binding("f8", "toggle_sort_keys", "Sort Keys"),
        Binding("f9", "minify", "Minify"),
        Binding("f10", "toggle_case", "Case Sensitive"),
        Binding("f11", "previous_match", "Prev Match", show=False),
        Binding("f12", "next_match", "Next Match", show=False),
        Binding("ctrl+s", "save", "Save"),
    ]

    def __init__(
        self,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self._options = FormatOptions()
        self._case_sensitive: bool = False
        self._formatted: str = ""
        self._matches: list[SearchMatch] = []
        self._current_match: int = 0

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(classes="input-container"):
            with Vertical(id="format-input-panel"):
                yield Static("Input JSON", classes="panel-header")
                yield Static("", id="format-error", classes="error-badge")
                yield TextArea(id="format-input", classes="editor")
                yield Static(id="char-count")
            with Vertical(id="format-output-panel"):
                yield Static("Formatted Output", classes="panel-header")
                yield Static(id="options-bar")
                yield Input(placeholder="Search in formatted JSON...", id="search-input")
                yield Static(id="search-status")
                with VerticalScroll(id="format-result", classes="result-panel"):
                    yield Static(id="format-output")
                yield Static(id="stats")
        yield Footer()

    def on_mount(self) -> None:
        """Load the document passed on the command line, if any."""
        self.query_one("#format-input", TextArea).load_text(getattr(self.app, "format_text", ""))
        self._refresh_output()
        self.query_one("#format-input", TextArea).focus()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._refresh_output()

    def on_input_changed(self, event: Input.Changed) -> None:
        """Restart at the first hit whenever the query changes."""
        self._current_match = 0
        self._refresh_search()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.action_next_match()

    def _refresh_output(self) -> None:
        """Re-format the input and redraw everything that depends on it."""
        text = self.query_one("#format-input", TextArea).text

        badge = self.query_one("#format-error", Static)
        message = validation_message(text)
        badge.update(message or "")
        badge.display = message is not None

        self._formatted = format_json(text, self._options)
        self.query_one("#char-count", Static).update(
            f"Input: {len(text)} characters   Output: {len(self._formatted)} characters"
        )
        self.query_one("#stats", Static).update(render_stats(json_stats(self._formatted)))
        self._refresh_options_bar()
        self._refresh_search()

    def _refresh_search(self) -> None:
        query = self.query_one("#search-input", Input).value
        self._matches = search(query, self._formatted, self._case_sensitive)
        if self._current_match >= len(self._matches):
            self._current_match = 0

        if not query:
            status = ""
        elif not self._matches:
            status = "No matches"
        else:
            status = match_position_label(self._current_match, len(self._matches))
        self.query_one("#search-status", Static).update(status)

        self.query_one("#format-output", Static).update(
            render_highlighted_json(self._formatted, self._matches, self._current_match)
        )
        self._scroll_to_current_match()

    def _scroll_to_current_match(self) -> None:
        if not self._matches:
            return
        match = self._matches[self._current_match]
        self.query_one("#format-result", VerticalScroll).scroll_to(y=match.line, animate=False)

    def _refresh_options_bar(self) -> None:
        sort_label = "on" if self._options.sort_keys else "off"
        case_label = "on" if self._case_sensitive else "off"
        self.query_one("#options-bar", Static).update(
            f"Indent: {self._options.indent_label}   Sort keys: {sort_label}   "
            f"Case sensitive: {case_label}"
        )

    def action_load_sample(self) -> None:
        self.query_one("#format-input", TextArea).load_text(FORMAT_SAMPLE)
        self._refresh_output()

    def action_clear(self) -> None:
        """Clear the input and the search."""
        self.query_one("#format-input", TextArea).load_text("")
        self.query_one("#search-input", Input).value = ""
        self._current_match = 0
        self._refresh_output()

    def action_cycle_indent(self) -> None:
        self._options = self._options.cycle_indent()
        self._refresh_output()

    def action_toggle_sort_keys(self) -> None:
        self._options = self._options.toggle_sort_keys()
        self._refresh_output()

    def action_toggle_case(self) -> None:
        self._case_sensitive = not self._case_sensitive
        self._current_match = 0
        self._refresh_options_bar()
        self._refresh_search()

    def action_minify(self) -> None:
        """Replace the input with its minified form."""
        text_area = self.query_one("#format-input", TextArea)
        if validation_message(text_area.text) is not None or not text_area.text.strip():
            self.notify("Nothing to minify", severity="warning")
            return
        text_area.load_text(minify_json(text_area.text))
        self._refresh_output()

    def action_next_match(self) -> None:
        self._current_match = next_index(self._current_match, len(self._matches))
        self._refresh_search()

    def action_previous_match(self) -> None:
        self._current_match = previous_index(self._current_match, len(self._matches))
        self._refresh_search()

    def action_save(self) -> None:
        self._save_formatted_output(self._formatted)

    @property
    def formatted(self) -> str:
        """The current formatted output (empty when the input is blank or invalid)."""
        return self._formatted

    @property
    def matches(self) -> list[SearchMatch]:
        return self._matches

    @property
    def current_match(self) -> int:
        return self._current_match

    @property
    def options(self) -> FormatOptions:
        return self._options
