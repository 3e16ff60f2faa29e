"""
Text Compare Screen for line-by-line comparison of plain text or code.

Lines are paired by position, not aligned: see
:mod:`jsontoolbox.engine.line_diff` for the exact rules.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Static, TextArea

from jsontoolbox.engine import TextCompareOptions, TextDiff, compare_texts
from jsontoolbox.engine.samples import TEXT_SAMPLE_LEFT, TEXT_SAMPLE_RIGHT
from jsontoolbox.tui.mixins import DualPaneMixin
from jsontoolbox.tui.widgets import render_diff_lines, render_text_summary


class TextCompareScreen(DualPaneMixin, Screen):
    """Side-by-side plain text comparison view."""

    CSS = """
    TextCompareScreen {
        layout: vertical;
    }

    #text-options, #text-summary {
        height: auto;
        padding: 0 1;
    }
    """

    BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [
        Binding("f5", "load_sample", "Load Sample"),
        Binding("f6", "clear_all", "Clear All"),
        Binding("f7", "toggle_whitespace", "Ignore Whitespace"),
        Binding("f8", "toggle_case", "Ignore Case"),
    ]

    def __init__(
        self,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self._options = TextCompareOptions()
        self._diff: TextDiff | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(classes="input-container"):
            with Vertical(id="left-panel", classes="active"):
                yield Static("Original Text", classes="panel-header")
                yield TextArea(id="left-input", classes="editor")
            with Vertical(id="right-panel", classes="inactive"):
                yield Static("Modified Text", classes="panel-header")
                yield TextArea(id="right-input", classes="editor")
        yield Static(id="text-options")
        yield Static(id="text-summary")
        with Horizontal(classes="result-container"):
            with VerticalScroll(id="left-result", classes="result-panel"):
                yield Static(id="left-lines")
            with VerticalScroll(id="right-result", classes="result-panel"):
                yield Static(id="right-lines")
        yield Footer()

    def on_mount(self) -> None:
        left_text, right_text = getattr(self.app, "text_pair", ("", ""))
        self._set_inputs(left_text, right_text)
        self.query_one("#left-input", TextArea).focus()
        self._update_panel_styles()

    def _set_inputs(self, left_text: str, right_text: str) -> None:
        self.query_one("#left-input", TextArea).load_text(left_text)
        self.query_one("#right-input", TextArea).load_text(right_text)
        self._refresh_diff()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._refresh_diff()

    def _refresh_diff(self) -> None:
        """Recompute the line diff from the current inputs and redraw."""
        left_text = self.query_one("#left-input", TextArea).text
        right_text = self.query_one("#right-input", TextArea).text

        self._diff = compare_texts(left_text, right_text, self._options)

        whitespace = "on" if self._options.ignore_whitespace else "off"
        case = "on" if self._options.ignore_case else "off"
        self.query_one("#text-options", Static).update(
            f"Ignore whitespace: {whitespace}   Ignore case: {case}"
        )
        self.query_one("#text-summary", Static).update(
            render_text_summary(self._diff.summary() if self._diff else None)
        )
        left_rows = self._diff.left if self._diff else ()
        right_rows = self._diff.right if self._diff else ()
        self.query_one("#left-lines", Static).update(render_diff_lines(left_rows))
        self.query_one("#right-lines", Static).update(render_diff_lines(right_rows))

    def action_load_sample(self) -> None:
        self._set_inputs(TEXT_SAMPLE_LEFT, TEXT_SAMPLE_RIGHT)

    def action_clear_all(self) -> None:
        self._set_inputs("", "")

    def action_toggle_whitespace(self) -> None:
        self._options = self._options.toggle_whitespace()
        self._refresh_diff()

    def action_toggle_case(self) -> None:
        self._options = self._options.toggle_case()
        self._refresh_diff()

    @property
    def diff(self) -> TextDiff | None:
        return self._diff

    @property
    def options(self) -> TextCompareOptions:
        return self._options
