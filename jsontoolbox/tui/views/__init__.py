"""TUI views for the JSON toolbox."""

from jsontoolbox.tui.views.formatter import FormatterScreen
from jsontoolbox.tui.views.json_compare import JsonCompareScreen
from jsontoolbox.tui.views.text_compare import TextCompareScreen

__all__ = ["FormatterScreen", "JsonCompareScreen", "TextCompareScreen"]
