"""
Main Textual application for the JSON Toolbox.

This is the entry point for the TUI. Each view is an app mode with its own
screen stack, so switching views keeps the text typed into the others.

Views:
    - compare: structural comparison of two JSON documents
    - format: formatter with highlighting, search and statistics
    - text: positional comparison of two plain texts
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from textual.app import App
from textual.binding import Binding

from jsontoolbox.tui.mixins.export import DEFAULT_OUTPUT_DIR
from jsontoolbox.tui.views.formatter import FormatterScreen
from jsontoolbox.tui.views.json_compare import JsonCompareScreen
from jsontoolbox.tui.views.text_compare import TextCompareScreen

logger = logging.getLogger(__name__)

VIEWS = ("compare", "format", "text")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class JsonToolboxApp(App):
    """A Textual app bundling the JSON and text comparison tools."""

    TITLE = "JSON Toolbox"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        height: 3;
        background: $primary;
        color: $text;
    }

    Footer {
        dock: bottom;
        height: 1;
        background: $primary-darken-2;
    }

    /* Input panels */
    .input-container {
        height: 2fr;
    }

    #left-panel, #right-panel {
        width: 50%;
        padding: 0 1;
    }

    #left-panel.active, #right-panel.active {
        border: solid $accent;
    }

    #left-panel.inactive, #right-panel.inactive {
        border: solid $primary;
    }

    .panel-header {
        height: 1;
        background: $surface;
        text-align: center;
        text-style: bold;
    }

    .editor {
        height: 1fr;
    }

    .error-badge {
        height: 1;
        background: $error 30%;
        color: $text;
        text-style: bold;
        padding: 0 1;
    }

    /* Result panels */
    .result-container {
        height: 3fr;
    }

    .result-panel {
        width: 1fr;
        height: 1fr;
        border: solid $primary;
        padding: 0 1;
    }

    Static {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("f1", "show_view('compare')", "JSON Compare", show=True),
        Binding("f2", "show_view('format')", "Formatter", show=True),
        Binding("f3", "show_view('text')", "Text Compare", show=True),
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    MODES = {
        "compare": JsonCompareScreen,
        "format": FormatterScreen,
        "text": TextCompareScreen,
    }

    def __init__(
        self,
        compare_texts: tuple[str, str] = ("", ""),
        format_text: str = "",
        text_pair: tuple[str, str] = ("", ""),
        initial_view: str = "compare",
        output_dir: str = DEFAULT_OUTPUT_DIR,
    ):
        """Initialize the app with optional preloaded documents.

        Args:
            compare_texts: Original and modified JSON for the compare view.
            format_text: JSON for the formatter view.
            text_pair: Original and modified text for the text compare view.
            initial_view: One of "compare", "format" or "text".
            output_dir: Directory the formatter saves into.

        Raises:
            ValueError: If ``initial_view`` is not a known view.
        """
        if initial_view not in VIEWS:
            raise ValueError(
                f"Unknown view '{initial_view}'. Supported views: {', '.join(VIEWS)}"
            )
        super().__init__()
        self.compare_texts = compare_texts
        self.format_text = format_text
        self.text_pair = text_pair
        self.initial_view = initial_view
        self.output_dir = output_dir

    def on_mount(self) -> None:
        self.switch_mode(self.initial_view)

    def action_show_view(self, view: str) -> None:
        """Switch to another view, keeping the state of the current one."""
        if view == self.current_mode:
            return
        logger.debug("Switching view %s -> %s", self.current_mode, view)
        self.switch_mode(view)


def _read_text_file(path: str, label: str) -> str:
    """Read a preload file, exiting with an error message if it is unusable."""
    if not os.path.exists(path):
        print(f"Error: {label} not found: {path}", file=sys.stderr)
        sys.exit(1)

    if not os.access(path, os.R_OK):
        print(f"Error: {label} permission denied: {path}", file=sys.stderr)
        sys.exit(1)

    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read {label.lower()} {path}: {e}", file=sys.stderr)
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compare and format JSON documents, and compare plain text, "
        "in a terminal UI."
    )
    parser.add_argument(
        "--left",
        default=None,
        help="Original file for the comparison views",
    )
    parser.add_argument(
        "--right",
        default=None,
        help="Modified file for the comparison views",
    )
    parser.add_argument(
        "--format-file",
        "-f",
        default=None,
        help="JSON file to open in the formatter",
    )
    parser.add_argument(
        "--view",
        choices=VIEWS,
        default=None,
        help="View to open first (default: format when only --format-file is "
        "given, otherwise compare)",
    )
    parser.add_argument(
        "-O",
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help="Output directory for saved files (default: current directory)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Log level for --log-file (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log messages to this file",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the application."""
    args = build_parser().parse_args(argv)

    # The terminal belongs to Textual, so logs only go to a file
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=getattr(logging, args.log_level),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    left_text = _read_text_file(args.left, "Left file") if args.left else ""
    right_text = _read_text_file(args.right, "Right file") if args.right else ""
    format_text = (
        _read_text_file(args.format_file, "Format file") if args.format_file else ""
    )

    initial_view = args.view
    if initial_view is None:
        only_format = args.format_file and not (args.left or args.right)
        initial_view = "format" if only_format else "compare"

    app = JsonToolboxApp(
        compare_texts=(left_text, right_text),
        format_text=format_text,
        text_pair=(left_text, right_text),
        initial_view=initial_view,
        output_dir=args.output_dir,
    )
    app.run()


if __name__ == "__main__":
    main()
