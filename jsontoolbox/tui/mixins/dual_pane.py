"""
Dual Pane Mixin for left/right input switching.

Provides consistent panel switching behavior across the two comparison
screens:
- action_switch_panel(): Toggle between left and right input panels
- action_focus_left() / action_focus_right(): Jump to a specific panel
- _update_panel_styles(): Update active/inactive CSS classes on panels
- _focus_active_widget(): Focus the input of the active panel

Usage:
    class MyDualPaneScreen(DualPaneMixin, Screen):
        BINDINGS = DualPaneMixin.DUAL_PANE_BINDINGS + [...]

Screens using this mixin must contain ``#left-panel``/``#right-panel``
containers holding ``#left-input``/``#right-input`` widgets.
"""

from __future__ import annotations

from textual.binding import Binding
from textual.css.query import NoMatches


class DualPaneMixin:
    """Mixin for screens with a left and a right input panel.

    Class Attributes:
        DUAL_PANE_BINDINGS: Panel switching bindings. Function and
            modifier keys only, so typing into a focused input is never
            intercepted.
    """

    DUAL_PANE_BINDINGS = [
        Binding("f4", "switch_panel", "Switch Panel", show=True),
        Binding("alt+left", "focus_left", "Left Panel", show=False),
        Binding("alt+right", "focus_right", "Right Panel", show=False),
    ]

    _active_panel: str = "left"
    """Currently active panel identifier ('left' or 'right')."""

    @property
    def is_left_active(self) -> bool:
        return self._active_panel == "left"

    @property
    def is_right_active(self) -> bool:
        return self._active_panel == "right"

    def action_switch_panel(self) -> None:
        """Toggle between left and right panels and move focus along."""
        self._active_panel = "right" if self._active_panel == "left" else "left"
        self._update_panel_styles()
        self._focus_active_widget()

    def action_focus_left(self) -> None:
        if self._active_panel != "left":
            self._active_panel = "left"
            self._update_panel_styles()
            self._focus_active_widget()

    def action_focus_right(self) -> None:
        if self._active_panel != "right":
            self._active_panel = "right"
            self._update_panel_styles()
            self._focus_active_widget()

    def _update_panel_styles(self) -> None:
        """Update active/inactive CSS classes on panels.

        Queries for #left-panel and #right-panel widgets and updates
        their CSS classes based on which panel is currently active.
        Handles missing panels gracefully.
        """
        try:
            left = self.query_one("#left-panel")
            right = self.query_one("#right-panel")
        except NoMatches:
            return

        for panel, is_active in [(left, self.is_left_active), (right, self.is_right_active)]:
            if is_active:
                panel.remove_class("inactive")
                panel.add_class("active")
            else:
                panel.remove_class("active")
                panel.add_class("inactive")

    def _focus_active_widget(self) -> None:
        """Focus the input of the active panel."""
        try:
            self.query_one(f"#{self._active_panel}-input").focus()
        except NoMatches:
            return
