"""
JSON Compare Screen for side-by-side structural comparison.

Displays an original and a modified JSON document, a summary of the
structural diff and both documents re-formatted with every changed key
highlighted.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static, TextArea

from jsontoolbox.engine import (
    DiffReport,
    annotate_json_lines,
    compare_json,
    only_differences,
    validation_message,
)
from jsontoolbox.engine.samples import COMPARE_SAMPLE_LEFT, COMPARE_SAMPLE_RIGHT
from jsontoolbox.tui.mixins import DualPaneMixin
from jsontoolbox.tui.widgets import render_diff_summary, render_json_lines


class JsonCompareScreen(DualPaneMixin, Screen):
    """Side-by-side JSON comparison view.

    The left input holds the original document and the right input the
    modified one. Every edit recomputes the diff; when either side is blank
    or invalid the summary and highlighting are suppressed.
    """

    CSS = """
    JsonCompareScreen {
        layout: vertical;
    }

    #summary {
        height: auto;
        padding: 0 1;
    }
    """

    BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [
        Binding("f5", "load_sample", "Load Sample"),
        Binding("f6", "clear_all", "Clear All"),
        Binding("f7", "toggle_differences", "Differences Only"),
    ]

    def __init__(
        self,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self._report: DiffReport | None = None
        self._differences_only: bool = False

    def compose(self) -> ComposeResult:
        """Compose the input panels, the summary and the result panels."""
        yield Header()
        with Horizontal(classes="input-container"):
            with Vertical(id="left-panel", classes="active"):
                yield Static("Original JSON", classes="panel-header")
                yield Static("", id="left-error", classes="error-badge")
                yield TextArea(id="left-input", classes="editor")
            with Vertical(id="right-panel", classes="inactive"):
                yield Static("Modified JSON", classes="panel-header")
                yield Static("", id="right-error", classes="error-badge")
                yield TextArea(id="right-input", classes="editor")
        yield Static(id="summary")
        with Horizontal(classes="result-container"):
            with VerticalScroll(id="left-result", classes="result-panel"):
                yield Static(id="left-lines")
            with VerticalScroll(id="right-result", classes="result-panel"):
                yield Static(id="right-lines")
        yield Footer()

    def on_mount(self) -> None:
        """Load any documents passed on the command line."""
        left_text, right_text = getattr(self.app, "compare_texts", ("", ""))
        self._set_inputs(left_text, right_text)
        self.query_one("#left-input", TextArea).focus()
        self._update_panel_styles()

    def _set_inputs(self, left_text: str, right_text: str) -> None:
        self.query_one("#left-input", TextArea).load_text(left_text)
        self.query_one("#right-input", TextArea).load_text(right_text)
        self._refresh_comparison()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._refresh_comparison()

    def _refresh_comparison(self) -> None:
        """Recompute the diff from the current input text and redraw."""
        left_text = self.query_one("#left-input", TextArea).text
        right_text = self.query_one("#right-input", TextArea).text

        self._show_error("#left-error", validation_message(left_text))
        self._show_error("#right-error", validation_message(right_text))

        self._report = compare_json(left_text, right_text)
        self.query_one("#summary", Static).update(render_diff_summary(self._report))

        left_lines = annotate_json_lines(left_text, self._report, "left")
        right_lines = annotate_json_lines(right_text, self._report, "right")
        if self._differences_only:
            left_lines = only_differences(left_lines)
            right_lines = only_differences(right_lines)

        self.query_one("#left-lines", Static).update(render_json_lines(left_lines))
        self.query_one("#right-lines", Static).update(render_json_lines(right_lines))

    def _show_error(self, selector: str, message: str | None) -> None:
        badge = self.query_one(selector, Static)
        badge.update(message or "")
        badge.display = message is not None

    def action_load_sample(self) -> None:
        self._set_inputs(COMPARE_SAMPLE_LEFT, COMPARE_SAMPLE_RIGHT)

    def action_clear_all(self) -> None:
        self._set_inputs("", "")

    def action_toggle_differences(self) -> None:
        """Toggle between all lines and changed lines only."""
        self._differences_only = not self._differences_only
        self._refresh_comparison()

        status = "differences only" if self._differences_only else "all lines"
        self.notify(f"Showing {status}")

    @property
    def report(self) -> DiffReport | None:
        """The current structural diff, or None when it is suppressed."""
        return self._report

    @property
    def differences_only(self) -> bool:
        return self._differences_only
