"""Mixins for the TUI application."""

from jsontoolbox.tui.mixins.dual_pane import DualPaneMixin
from jsontoolbox.tui.mixins.export import ExportMixin

__all__ = [
    "DualPaneMixin",
    "ExportMixin",
]
