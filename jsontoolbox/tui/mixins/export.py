"""
Export Mixin for saving the formatted document.

Provides lightweight save helpers for screens that produce output:
- _get_output_dir(): Get output directory from app or default
- _save_formatted_output(): Write the text and report the result

Usage:
    class MyScreen(ExportMixin, Screen):
        def action_save(self):
            self._save_formatted_output(self._formatted)
"""

from __future__ import annotations

from jsontoolbox.engine import DEFAULT_SAVE_NAME, save_formatted

# Used when the app was started without --output-dir
DEFAULT_OUTPUT_DIR = "."


class ExportMixin:
    """Mixin providing save helpers with user notifications."""

    def _get_output_dir(self) -> str:
        """Get the output directory from app or use default.

        Returns:
            The output directory path.
        """
        output_dir = getattr(self.app, "output_dir", None)
        if not output_dir:
            output_dir = DEFAULT_OUTPUT_DIR
        return output_dir

    def _save_formatted_output(self, formatted: str, filename: str = DEFAULT_SAVE_NAME) -> str | None:
        """Save formatted JSON and notify the user.

        Args:
            formatted: The formatted JSON text, written verbatim.
            filename: Target file name inside the output directory.

        Returns:
            The written path, or None if there was nothing to save or the
            write failed.
        """
        if not formatted:
            self.notify("Nothing to save", severity="warning")
            return None

        try:
            path = save_formatted(formatted, self._get_output_dir(), filename)
        except (OSError, UnicodeError) as e:
            self.notify(f"Save failed: {e}", severity="error")
            return None

        self.notify(f"Saved to {path}")
        return path
